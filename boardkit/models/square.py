"""Board square value object."""

from dataclasses import dataclass


FILES = "abcdefgh"
RANKS = "12345678"


class InvalidSquareError(ValueError):
    """Raised when a square lies outside the 8x8 board."""


@dataclass(frozen=True)
class Square:
    """A logical board square.

    Row 0 is rank 1 and column 0 is the a-file, regardless of which side the
    board is viewed from. Offset arithmetic may produce squares off the board,
    so callers check ``is_on_board`` before converting.
    """
    row: int
    column: int

    @property
    def is_on_board(self) -> bool:
        """Whether both coordinates lie in 0..7."""
        return 0 <= self.row <= 7 and 0 <= self.column <= 7

    @property
    def id(self) -> str:
        return f"{self.row},{self.column}"
