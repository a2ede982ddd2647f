"""
Drawing Utility Functions
"""
from typing import Dict, List, Optional, Tuple

import cv2
import numpy as np

from igo_study.utils import sgf_utils

BOARD_COLOR = (92, 179, 220)  # BGR wood
LINE_COLOR = (0, 0, 0)
MARK_COLORS = {True: (0, 160, 0), False: (0, 0, 255)}


def grid_points(board_size: int, spacing: int = 30, margin: int = 30) -> Dict[Tuple[int, int], Tuple[int, int]]:
    """Pixel position of every intersection.

    Returns:
        {(row, col): (x, y)}
    """
    return {(row, col): (margin + col * spacing, margin + row * spacing)
            for row in range(board_size) for col in range(board_size)}


def draw_empty_board(board_size: int, spacing: int = 30, margin: int = 30) -> np.ndarray:
    """Create an image of an empty board with its grid lines."""
    side = 2 * margin + (board_size - 1) * spacing
    img = np.zeros((side, side, 3), dtype=np.uint8)
    img[:] = BOARD_COLOR

    last = margin + (board_size - 1) * spacing
    for i in range(board_size):
        offset = margin + i * spacing
        cv2.line(img, (margin, offset), (last, offset), LINE_COLOR, 1)
        cv2.line(img, (offset, margin), (offset, last), LINE_COLOR, 1)

    return img


def draw_stones_on_board(board_image, moves: List[Tuple[str, str]], points, radius: int = 13):
    """
    Draws the stones of a move sequence onto the board image.

    Stones are drawn in order without removing captures; coordinates off the
    board are skipped.

    Parameters:
        board_image (np.ndarray): The base image of the board.
        moves (list): [(player, sgf_coord), ...]
        points (dict): {(row, col): (x, y)} pixel coordinate mapping.

    Returns:
        np.ndarray: Image with stones drawn.
    """
    img = board_image.copy()

    for number, (player, sgf_coord) in enumerate(moves, start=1):
        coord = sgf_utils.convert_sgf_coord_to_coord(sgf_coord)
        point = points.get(coord) if coord else None
        if point is None:
            continue

        fill_color = (0, 0, 0) if player == 'B' else (255, 255, 255)
        text_color = (255, 255, 255) if player == 'B' else (0, 0, 0)

        cv2.circle(img, point, radius, fill_color, -1)
        cv2.circle(img, point, radius, LINE_COLOR, 1)

        label = str(number)
        cv2.putText(img, label, (point[0] - 4 * len(label), point[1] + 4),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.35, text_color, 1, cv2.LINE_AA)

    return img


def draw_verdict_mark(board_image, sgf_coord: str, points, correct: bool, radius: int = 18):
    """Circle the trial move in green when correct, red otherwise."""
    img = board_image.copy()
    coord = sgf_utils.convert_sgf_coord_to_coord(sgf_coord)
    point = points.get(coord) if coord else None
    if point is not None:
        cv2.circle(img, point, radius, MARK_COLORS[bool(correct)], 2)
    return img


def render_position(board_size: int, moves: List[Tuple[str, str]], move_number: Optional[int] = None,
                    mark: Optional[Tuple[str, bool]] = None) -> np.ndarray:
    """Draw the board after move_number moves.

    Args:
        board_size: Number of lines on the board
        moves: [(player, sgf_coord), ...] in play order
        move_number: How many moves to show, all of them when None
        mark: Optional (sgf_coord, correct) to circle

    Returns:
        BGR image of the position
    """
    points = grid_points(board_size)
    shown = moves if move_number is None else moves[:max(move_number, 0)]
    img = draw_stones_on_board(draw_empty_board(board_size), shown, points)
    if mark is not None:
        img = draw_verdict_mark(img, mark[0], points, mark[1])
    return img
