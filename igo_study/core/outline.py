"""
Deciding whether a clicked list item belongs to an exercise section.

A menu note lists problem sets as list items under headings. An item is an
exercise when the heading it sits under contains the exercise marker.
"""
import re
from typing import List, Optional, Sequence

EXERCISE_MARKER = '練習問題'

_HEADING_RE = re.compile(r'^\s{0,3}(#{1,6})\s+(.*?)\s*#*\s*$')
_LIST_ITEM_RE = re.compile(r'^\s*(?:[-*+]|\d+[.)])\s+(?:\[[ xX]\]\s+)?(.*\S)\s*$')


class OutlineItem:
    """A list item with the headings that precede it.

    Attributes:
        text: Text of the list item
        sibling_headings: Headings before the item's list at the same level,
            in document order
        preceding_headings: Every heading before the item in the document,
            in document order
    """

    def __init__(self, text: str, sibling_headings: Sequence[str] = (),
                 preceding_headings: Sequence[str] = ()):
        self.text = text
        self.sibling_headings = list(sibling_headings)
        self.preceding_headings = list(preceding_headings)

    def __repr__(self):
        return f'OutlineItem({self.text!r})'


def _nearest(headings: Sequence[str]) -> Optional[str]:
    return headings[-1] if headings else None


def is_exercise(sibling_headings: Sequence[str], preceding_headings: Sequence[str],
                marker: str = EXERCISE_MARKER) -> bool:
    """Classify a list item from the headings around it.

    The nearest heading before the item's list decides first; only the
    closest one counts, even if an earlier heading carries the marker.
    Otherwise the last heading before the item anywhere in the document is
    checked.
    """
    nearest = _nearest(sibling_headings)
    if nearest is not None and marker in nearest:
        return True
    last = _nearest(preceding_headings)
    return last is not None and marker in last


def outline_from_markdown(text: str) -> List[OutlineItem]:
    """Build outline items for every list item of a markdown note.

    Headings inside fenced code blocks are ignored. A heading, a fence or a
    non-indented paragraph ends a list; the headings seen before a list
    starts are its siblings.
    """
    items = []
    headings: List[str] = []
    list_headings: List[str] = []
    in_fence = False
    in_list = False

    for line in text.splitlines():
        if line.lstrip().startswith('```'):
            in_fence = not in_fence
            in_list = False
            continue
        if in_fence:
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            headings.append(heading.group(2))
            in_list = False
            continue

        item = _LIST_ITEM_RE.match(line)
        if item:
            if not in_list:
                list_headings = list(headings)
                in_list = True
            items.append(OutlineItem(item.group(1), list_headings, headings))
        elif line.strip() and not line.startswith((' ', '\t')):
            in_list = False

    return items


def exercise_items(text: str, marker: str = EXERCISE_MARKER) -> List[OutlineItem]:
    """Return the list items of a note that are exercises."""
    return [item for item in outline_from_markdown(text)
            if is_exercise(item.sibling_headings, item.preceding_headings, marker)]
