"""Highlight model for hinted squares."""

from typing import FrozenSet, Iterable, Set

from PyQt6.QtCore import QObject, pyqtSignal

from boardkit.models.square import Square


class HighlightModel(QObject):
    """Model holding the set of hinted squares.

    Hinting an already-hinted square changes nothing and emits nothing.
    """

    hinted_squares_changed = pyqtSignal(object)  # Emitted with a frozenset of Squares

    def __init__(self) -> None:
        """Initialize the highlight model."""
        super().__init__()
        self._hinted_squares: Set[Square] = set()

    @property
    def hinted_squares(self) -> FrozenSet[Square]:
        return frozenset(self._hinted_squares)

    def is_hinted(self, square: Square) -> bool:
        return square in self._hinted_squares

    def add_squares(self, squares: Iterable[Square]) -> None:
        """Add squares to the hinted set.

        Args:
            squares: Squares to hint; off-board squares are skipped.
        """
        before = len(self._hinted_squares)
        self._hinted_squares.update(square for square in squares if square.is_on_board)
        if len(self._hinted_squares) != before:
            self.hinted_squares_changed.emit(self.hinted_squares)

    def remove_squares(self, squares: Iterable[Square]) -> None:
        """Remove squares from the hinted set, ignoring ones not hinted."""
        before = len(self._hinted_squares)
        self._hinted_squares.difference_update(squares)
        if len(self._hinted_squares) != before:
            self.hinted_squares_changed.emit(self.hinted_squares)

    def clear(self) -> None:
        """Remove all hinted squares."""
        if self._hinted_squares:
            self._hinted_squares.clear()
            self.hinted_squares_changed.emit(self.hinted_squares)
