"""Highlight controller for transient square hints."""

from typing import Iterable, List, Optional, Set, Union

from PyQt6.QtCore import QTimer

from boardkit.models.highlight_model import HighlightModel
from boardkit.models.square import Square
from boardkit.services.logging_service import LoggingService
from boardkit.utils.square_mapper import from_algebraic


SquareLike = Union[Square, str]


class HighlightController:
    """Controller for hinting squares, optionally for a limited time.

    A single expiry timer backs all timed hints. Each timed call adds its
    squares to the timed set and restarts the timer with its own duration;
    when the timer fires, only the timed set is cleared. Untimed hints never
    expire, so a timer scheduled earlier cannot clear them.
    """

    def __init__(self, highlight_model: Optional[HighlightModel] = None) -> None:
        """Initialize the highlight controller.

        Args:
            highlight_model: Model to drive; a new one is created if omitted.
        """
        self.highlight_model = highlight_model or HighlightModel()
        self._clear_timer: Optional[QTimer] = None
        self._timed_squares: Set[Square] = set()

    def get_highlight_model(self) -> HighlightModel:
        """Get the highlight model.

        Returns:
            The HighlightModel instance for observing hinted squares.
        """
        return self.highlight_model

    def hint(self, squares: Union[SquareLike, Iterable[SquareLike]]) -> None:
        """Hint one or more squares until cleared.

        A pending expiry keeps running for the other timed squares. A square
        that was timed becomes permanent when hinted again here.

        Args:
            squares: A Square, an algebraic name ("e4"), or an iterable of either.
                Malformed names are ignored.
        """
        resolved = self._resolve(squares)
        self._timed_squares.difference_update(resolved)
        self.highlight_model.add_squares(resolved)

    def hint_for(self, squares: Union[SquareLike, Iterable[SquareLike]], seconds: float) -> None:
        """Hint squares and clear the timed hints after a delay.

        Args:
            squares: A Square, an algebraic name, or an iterable of either.
            seconds: Delay before the timed hints are cleared; replaces the
                delay of any earlier pending call.
        """
        self._cancel_timer()
        resolved = [square for square in self._resolve(squares) if square.is_on_board]
        self._timed_squares.update(resolved)
        self.highlight_model.add_squares(resolved)

        self._clear_timer = QTimer()
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(self._on_clear_timeout)
        self._clear_timer.start(max(0, int(seconds * 1000)))

    def clear_hint(self) -> None:
        """Remove all hints and cancel any pending expiry."""
        self._cancel_timer()
        self._timed_squares.clear()
        self.highlight_model.clear()

    @property
    def has_pending_clear(self) -> bool:
        """Whether a timed clear is scheduled."""
        return self._clear_timer is not None and self._clear_timer.isActive()

    def _on_clear_timeout(self) -> None:
        self._clear_timer = None
        expired, self._timed_squares = self._timed_squares, set()
        self.highlight_model.remove_squares(expired)

    def _cancel_timer(self) -> None:
        if self._clear_timer is not None:
            self._clear_timer.stop()
            self._clear_timer = None

    @staticmethod
    def _resolve(squares: Union[SquareLike, Iterable[SquareLike]]) -> List[Square]:
        if isinstance(squares, (Square, str)):
            squares = [squares]
        resolved = []
        for item in squares:
            square = from_algebraic(item) if isinstance(item, str) else item
            if isinstance(square, Square):
                resolved.append(square)
            else:
                LoggingService.get_instance().debug(f"Ignoring invalid hint square: {item!r}")
        return resolved
