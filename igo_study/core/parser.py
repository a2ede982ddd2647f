"""
Parser for SGF fragments embedded in problem notes.

Only the small subset of SGF a problem note needs is understood: board size,
the B/W move properties, the first comment and the first result.
"""
import re
from typing import Iterable, List, Optional, Set, Tuple

DEFAULT_BOARD_SIZE = 19
DEFAULT_FENCE_TAGS = ('sgf', 'sgf-edit', 'sgfedit')

# Property identifiers must not be the tail of a longer identifier (AB, GC, PC...)
_SIZE_RE = re.compile(r'(?<![A-Z])SZ\[([^\]]*)\]')
_MOVE_RE = re.compile(r'(?<![A-Z])([BW])\[([a-z]{2})\]')
_COMMENT_RE = re.compile(r'(?<![A-Z])C\[((?:\\.|[^\\\]])*)\]', re.DOTALL)
_RESULT_RE = re.compile(r'(?<![A-Z])RE\[((?:\\.|[^\\\]])*)\]', re.DOTALL)
_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)


class ProblemRecord:
    """Facts parsed from one problem's SGF fragment.

    Built once when a problem is opened and never modified afterwards;
    trial moves are appended to a copy of the fragment, not to the record.
    """

    def __init__(self, fragment: str, board_size: int = DEFAULT_BOARD_SIZE,
                 moves: Optional[List[Tuple[str, str]]] = None,
                 comment: str = '', result: str = '',
                 accepted_answers: Iterable[str] = ()):
        self.fragment = fragment
        self.board_size = board_size
        self.moves = list(moves or [])
        self.comment = comment
        self.result = result
        self.accepted_answers = frozenset(accepted_answers)

    @property
    def move_coords(self) -> Set[str]:
        return {coord for _, coord in self.moves}

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def with_answers(self, accepted_answers: Iterable[str]) -> 'ProblemRecord':
        """Return a copy of this record carrying the given accepted answers."""
        return ProblemRecord(self.fragment, self.board_size, self.moves,
                             self.comment, self.result, accepted_answers)

    def __repr__(self):
        return (f'ProblemRecord(board_size={self.board_size}, moves={len(self.moves)}, '
                f'comment={self.comment!r}, result={self.result!r})')


def extract_fragment(note_text: str, fence_tags: Iterable[str] = DEFAULT_FENCE_TAGS) -> Optional[str]:
    """Find the first fenced SGF block in a note.

    Args:
        note_text: Full markdown text of the note
        fence_tags: Info strings that mark an SGF block, e.g. 'sgf' or 'sgf-edit'

    Returns:
        The block's inner text with surrounding whitespace removed, or None
        if the note has no such block
    """
    # Longest tag first so 'sgf' does not shadow 'sgf-edit'
    tags = sorted(fence_tags, key=len, reverse=True)
    if not tags:
        return None
    pattern = re.compile(r'```(?:%s)(?=\s)(.*?)```' % '|'.join(re.escape(tag) for tag in tags),
                         re.DOTALL)
    match = pattern.search(note_text)
    if not match:
        return None
    return match.group(1).strip()


def parse_board_size(fragment: str) -> int:
    match = _SIZE_RE.search(fragment)
    if not match:
        return DEFAULT_BOARD_SIZE
    value = match.group(1).strip()
    if not value.isdigit() or int(value) < 1:
        return DEFAULT_BOARD_SIZE
    return int(value)


def parse_moves(fragment: str) -> List[Tuple[str, str]]:
    """Return (player, coord) for every move property, in textual order."""
    return [(player, coord.lower()) for player, coord in _MOVE_RE.findall(fragment)]


def _first_text_value(pattern, fragment: str) -> str:
    match = pattern.search(fragment)
    if not match:
        return ''
    return _ESCAPE_RE.sub(r'\1', match.group(1))


def parse_fragment(fragment: str) -> ProblemRecord:
    """Parse an SGF fragment into a ProblemRecord.

    Args:
        fragment: SGF text such as '(;SZ[9];B[ee]C[center opening])'

    Returns:
        ProblemRecord with board size, moves, comment and result filled in
    """
    return ProblemRecord(
        fragment=fragment,
        board_size=parse_board_size(fragment),
        moves=parse_moves(fragment),
        comment=_first_text_value(_COMMENT_RE, fragment),
        result=_first_text_value(_RESULT_RE, fragment),
    )


def load_problem(note_text: str, fence_tags: Iterable[str] = DEFAULT_FENCE_TAGS) -> Optional[ProblemRecord]:
    """Parse the SGF block of a note, or return None when the note has none."""
    fragment = extract_fragment(note_text, fence_tags)
    if fragment is None:
        return None
    return parse_fragment(fragment)
