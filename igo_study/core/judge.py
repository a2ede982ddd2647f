"""
Answer judging for problem submissions.
"""
from typing import Iterable, List, Optional, Set, Tuple, Union

from igo_study.utils import sgf_utils


def normalize_answer(entry: str, board_size: int) -> str:
    """Bring one answer to SGF form.

    Human coordinates ('C7') go through the codec, anything else (SGF
    coordinates or free text) is only trimmed and lower-cased.
    """
    entry = entry.strip()
    if sgf_utils.is_human_coord(entry):
        return sgf_utils.human_to_sgf(entry, board_size)
    return entry.lower()


def split_answers(raw: Union[str, Iterable, None]) -> List[str]:
    """Split a comma separated answer field (or a list of them) into entries."""
    if raw is None:
        return []
    if isinstance(raw, str):
        parts = raw.split(',')
    else:
        parts = [part for item in raw for part in str(item).split(',')]
    return [part.strip() for part in parts if part.strip()]


def _on_board_answers(entries: List[str], board_size: int) -> Set[str]:
    answers = {normalize_answer(entry, board_size) for entry in entries}
    return {answer for answer in answers if sgf_utils.is_on_board(answer, board_size)}


def normalize_answers(raw: Union[str, Iterable, None], board_size: int, default_answer: str) -> Set[str]:
    """Normalize the accepted answers of a problem.

    Entries that do not name a point on the board ('A20', 'I7', free text)
    can never be matched and are dropped.

    Args:
        raw: The note's answer field, comma separated or a list, may be empty
        board_size: Board size used to convert human coordinates
        default_answer: Answer used when the note does not configure one

    Returns:
        Non-empty set of SGF-form answers
    """
    answers = _on_board_answers(split_answers(raw), board_size)
    if not answers:
        answers = _on_board_answers(split_answers(default_answer), board_size)
    return answers or {normalize_answer(default_answer, board_size)}


def judge(coord: str, accepted_answers: Iterable[str], moves: Iterable[Union[str, Tuple[str, str]]],
          board_size: Optional[int] = None) -> bool:
    """Check a submitted SGF coordinate.

    A move is correct if it is one of the accepted answers or was already
    played in the recorded sequence. moves may hold plain coordinates or
    (player, coord) pairs. With board_size given, a coordinate off the board
    is never correct.
    """
    if board_size is not None and not sgf_utils.is_on_board(coord, board_size):
        return False
    played = {move[1] if isinstance(move, tuple) else move for move in moves}
    return coord in set(accepted_answers) or coord in played
