"""Conversions between algebraic notation, board squares, and display space.

All functions here are pure. Perspective is a python-chess color
(``chess.WHITE`` or ``chess.BLACK``); flipping only affects where a square is
drawn, never its logical coordinates.
"""

import math
from typing import Optional, Tuple

import chess

from boardkit.models.square import FILES, RANKS, InvalidSquareError, Square


def to_algebraic(square: Square) -> str:
    """Convert a square to algebraic notation.

    Args:
        square: Square to convert.

    Returns:
        Algebraic name such as "e4".

    Raises:
        InvalidSquareError: If the square is off the board.
    """
    if not square.is_on_board:
        raise InvalidSquareError(f"Square off board: row={square.row}, column={square.column}")
    return f"{FILES[square.column]}{square.row + 1}"


def from_algebraic(text) -> Optional[Square]:
    """Parse algebraic notation.

    Args:
        text: Two-character square name, file a-h followed by rank 1-8.

    Returns:
        The parsed Square, or None for anything else.
    """
    if not isinstance(text, str) or len(text) != 2:
        return None
    file_char, rank_char = text[0], text[1]
    if file_char not in FILES or rank_char not in RANKS:
        return None
    return Square(row=RANKS.index(rank_char), column=FILES.index(file_char))


def to_index(square: Square) -> chess.Square:
    """Convert a square to a python-chess square index.

    Raises:
        InvalidSquareError: If the square is off the board.
    """
    if not square.is_on_board:
        raise InvalidSquareError(f"Square off board: row={square.row}, column={square.column}")
    return chess.square(square.column, square.row)


def from_index(index: chess.Square) -> Square:
    """Convert a python-chess square index to a Square."""
    return Square(row=chess.square_rank(index), column=chess.square_file(index))


def display_coordinates(square: Square, perspective: chess.Color) -> Tuple[int, int]:
    """Get the visual (row, column) of a square, counted from the top-left.

    Args:
        square: Logical square.
        perspective: Side the board is viewed from.

    Returns:
        Tuple (display_row, display_column).
    """
    if perspective == chess.BLACK:
        return square.row, 7 - square.column
    return 7 - square.row, square.column


def display_position(square: Square, perspective: chess.Color, board_size: float) -> Tuple[float, float]:
    """Get the pixel center of a square on a board of the given size.

    Args:
        square: Logical square.
        perspective: Side the board is viewed from.
        board_size: Board edge length in pixels.

    Returns:
        Tuple (x, y) of the square center.
    """
    display_row, display_column = display_coordinates(square, perspective)
    square_size = board_size / 8
    x = square_size / 2 + square_size * display_column
    y = square_size / 2 + square_size * display_row
    return (x, y)


def square_from_point(x: float, y: float, perspective: chess.Color, board_size: float) -> Optional[Square]:
    """Hit-test a pixel position.

    Returns:
        The square under the point, or None if the point is off the board.
    """
    if board_size <= 0 or x < 0 or y < 0:
        return None
    square_size = board_size / 8
    display_column = int(x // square_size)
    display_row = int(y // square_size)
    if display_column > 7 or display_row > 7:
        return None
    if perspective == chess.BLACK:
        return Square(row=display_row, column=7 - display_column)
    return Square(row=7 - display_row, column=display_column)


def _round_steps(delta: float, square_size: float) -> int:
    # Half away from zero, so a drag of exactly half a square moves one step either way
    steps = delta / square_size
    return int(math.copysign(math.floor(abs(steps) + 0.5), steps))


def square_from_offset(origin: Square, dx: float, dy: float, perspective: chess.Color,
                       square_size: float) -> Square:
    """Compute the square a drag of (dx, dy) pixels from origin lands on.

    The result is not clamped; callers must reject off-board squares.

    Args:
        origin: Square the drag started on.
        dx: Horizontal pixel delta (right is positive).
        dy: Vertical pixel delta (down is positive).
        perspective: Side the board is viewed from.
        square_size: Edge length of one square in pixels.

    Returns:
        The target Square, possibly off the board.
    """
    if square_size <= 0:
        return origin
    column_offset = _round_steps(dx, square_size)
    row_offset = _round_steps(dy, square_size)
    if perspective == chess.BLACK:
        return Square(row=origin.row + row_offset, column=origin.column - column_offset)
    return Square(row=origin.row - row_offset, column=origin.column + column_offset)
