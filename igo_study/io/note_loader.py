"""
Utilities for loading problem notes.
"""
import os
from typing import Dict, List, Optional

import yaml

_FRONTMATTER_DELIMITER = '---'


class NotePage:
    """Metadata of a problem note.

    Attributes:
        name: File name without the .md extension
        path: Path of the note file
        tags: Tags from the frontmatter, always a list of strings
        properties: Remaining frontmatter properties (answer, question,
            igo_problem, completed, sgf_path, ...)
    """

    def __init__(self, name: str, path: str, tags: Optional[List[str]] = None,
                 properties: Optional[Dict] = None):
        self.name = name
        self.path = path
        self.tags = list(tags or [])
        self.properties = dict(properties or {})

    @property
    def answer(self):
        return self.properties.get('answer')

    @property
    def question(self):
        return self.properties.get('question')

    @property
    def sgf_path(self) -> Optional[str]:
        value = self.properties.get('sgf_path')
        return str(value) if value else None

    @property
    def is_problem(self) -> bool:
        return bool(self.properties.get('igo_problem'))

    @property
    def completed(self) -> bool:
        return self.properties.get('completed') is True

    def __repr__(self):
        return f'NotePage({self.name!r}, tags={self.tags})'


def split_frontmatter(text: str):
    """Split a note into its frontmatter dict and body.

    Returns:
        Tuple of (frontmatter, body). Notes without frontmatter, or with
        frontmatter that is not a YAML mapping, get an empty dict.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, text

    for i in range(1, len(lines)):
        if lines[i].strip() == _FRONTMATTER_DELIMITER:
            header = ''.join(lines[1:i])
            body = ''.join(lines[i + 1:])
            try:
                data = yaml.safe_load(header)
            except yaml.YAMLError as e:
                print(f"DEBUG: Ignoring malformed frontmatter: {e}")
                return {}, body
            return (data if isinstance(data, dict) else {}), body

    return {}, text


def _as_tags(value) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return [str(tag).lstrip('#') for tag in value if tag is not None]


def page_from_text(path: str, text: str) -> NotePage:
    """Build the NotePage of a note from its path and contents."""
    frontmatter, _ = split_frontmatter(text)
    properties = {str(key): value for key, value in frontmatter.items() if key != 'tags'}
    name = os.path.splitext(os.path.basename(path))[0]
    return NotePage(name, path, _as_tags(frontmatter.get('tags')), properties)


def read_note(path: str):
    """Read a note file.

    Args:
        path: Path to the markdown note

    Returns:
        Tuple of (NotePage, full note text)
    """
    print('read_note...')
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return page_from_text(path, text), text


def find_companion_sgf(page: NotePage, search_dir: Optional[str] = None) -> Optional[str]:
    """Find the .sgf file belonging to a note.

    The frontmatter sgf_path wins; otherwise '<note name>.sgf' next to the
    note (or in search_dir) is used when it exists.
    """
    base_dir = search_dir or os.path.dirname(page.path)
    if page.sgf_path:
        candidate = page.sgf_path
        if not os.path.isabs(candidate):
            candidate = os.path.join(base_dir, candidate)
        if os.path.isfile(candidate):
            return candidate

    candidate = os.path.join(base_dir, f'{page.name}.sgf')
    if os.path.isfile(candidate):
        return candidate
    return None


def is_listed(page: NotePage, filter_tag: str) -> bool:
    """Decide whether a note shows up in the problem list.

    Notes flagged igo_problem are always listed. Otherwise one of the tags
    must contain filter_tag, ignoring case; an empty filter lists only the
    flagged notes.
    """
    if page.is_problem:
        return True
    if not filter_tag:
        return False
    lower_filter = filter_tag.lower()
    return any(lower_filter in tag.lower() for tag in page.tags)


def list_problems(directory: str, filter_tag: str) -> List[NotePage]:
    """Load every markdown note under directory that is listed for filter_tag.

    Returns:
        Matching pages sorted by path
    """
    print('list_problems...')
    pages = []
    for root, _, files in os.walk(directory):
        for filename in sorted(files):
            if not filename.endswith('.md'):
                continue
            page, _ = read_note(os.path.join(root, filename))
            if is_listed(page, filter_tag.strip()):
                pages.append(page)
    return sorted(pages, key=lambda page: page.path)


def completion_percentage(pages: List[NotePage]) -> int:
    """Share of pages marked completed, rounded to a whole percent."""
    if not pages:
        return 0
    done = sum(1 for page in pages if page.completed)
    return int(done * 100 / len(pages) + 0.5)
