"""
Appending a trial move to an SGF fragment.
"""
from typing import List, Sequence, Tuple

# Black plays first in Go; used when the fragment has no moves yet
FIRST_PLAYER = 'B'

_OPPONENT = {'B': 'W', 'W': 'B'}


def next_player(moves: Sequence[Tuple[str, str]]) -> str:
    """Return the player to move after the given sequence."""
    if not moves:
        return FIRST_PLAYER
    return _OPPONENT.get(moves[-1][0], FIRST_PLAYER)


def append_move(fragment: str, moves: List[Tuple[str, str]], coord: str) -> Tuple[str, int]:
    """Append a move for the next player to a fragment.

    Args:
        fragment: Original SGF fragment, e.g. '(;SZ[19];B[pd])'
        moves: Moves parsed from that fragment
        coord: SGF coordinate of the new move

    Returns:
        Tuple of (updated fragment, move number to display). The new node goes
        right before the closing parenthesis; everything before it is kept as is.
    """
    node = f';{next_player(moves)}[{coord}]'
    close = fragment.rfind(')')
    if close == -1:
        updated = fragment + node
    else:
        updated = fragment[:close] + node + fragment[close:]
    return updated, len(moves) + 1
