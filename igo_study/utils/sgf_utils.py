"""
Coordinate conversions between human board notation and SGF notation.
"""
import math
import re

human_columns = 'abcdefghjklmnopqrstuvwxyz'  # Skipping 'i'
display_columns = human_columns.upper()

HUMAN_COORD_PATTERN = re.compile(r'^[a-zA-Z]\d{1,2}$')


def index_to_sgf_letter(index: int) -> str:
    """Encode a 0-based index as an SGF letter, '?' when outside 0..25."""
    if 0 <= index <= 25:
        return chr(97 + index)
    return '?'


def is_human_coord(text: str) -> bool:
    return bool(HUMAN_COORD_PATTERN.match(text.strip()))


def human_to_sgf(human: str, board_size: int) -> str:
    """Convert a human coordinate like 'C7' to SGF notation like 'cm'.

    Args:
        human: Column letter (never 'I') followed by a 1-based row number
        board_size: Number of lines on the board

    Returns:
        Two-character SGF coordinate. Columns that are not in the skip
        alphabet and rows off the board come back as '?'.
    """
    human = human.strip()
    col = human_columns.find(human[:1].lower()) if human else -1
    try:
        row = board_size - int(human[1:])
    except ValueError:
        row = -1
    return f'{index_to_sgf_letter(col)}{index_to_sgf_letter(row)}'


def sgf_to_human(sgf_coord: str, board_size: int) -> str:
    """Convert an SGF coordinate like 'cm' back to human notation like 'C7'.

    Parameters:
        sgf_coord (str): Two-character SGF coordinate string.
        board_size (int): Number of lines on the board.

    Returns:
        str: Display column letter (skipping 'I') followed by the row number.
    """
    if len(sgf_coord) != 2:
        return '?'
    col = ord(sgf_coord[0].lower()) - 97
    row = ord(sgf_coord[1].lower()) - 97
    col_label = display_columns[col] if 0 <= col < len(display_columns) else '?'
    return f'{col_label}{board_size - row}'


def convert_sgf_coord_to_coord(sgf_coord: str):
    """
    Converts an SGF coordinate string like 'dd' to a (row, col) tuple.

    Returns None for anything that is not two letters a..z.
    """
    if len(sgf_coord) != 2 or not all('a' <= c <= 'z' for c in sgf_coord):
        return None
    col = ord(sgf_coord[0]) - 97
    row = ord(sgf_coord[1]) - 97
    return (row, col)


def is_on_board(sgf_coord: str, board_size: int) -> bool:
    """True if sgf_coord is two letters that both index a line of the board."""
    coord = convert_sgf_coord_to_coord(sgf_coord)
    if coord is None:
        return False
    return all(0 <= index < board_size for index in coord)


def convert_click_to_sgf(x: float, y: float, width: float, height: float, board_size: int) -> str:
    """Map a click in canvas pixels to the SGF coordinate of the board cell.

    The canvas is divided evenly into board_size cells per axis. Renderers
    that draw a margin around the grid are only approximated by this.
    """
    if width <= 0 or height <= 0 or board_size <= 0:
        return '??'
    step_x = width / board_size
    step_y = height / board_size

    col = math.floor(x / step_x)
    row = math.floor(y / step_y)

    return f'{index_to_sgf_letter(col)}{index_to_sgf_letter(row)}'
