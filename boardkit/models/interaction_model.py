"""Interaction state model for selection, drag, and promotion."""

from dataclasses import dataclass
from typing import Optional, Union

import chess
from PyQt6.QtCore import QObject, pyqtSignal

from boardkit.models.move_attempt import MoveAttempt
from boardkit.models.square import Square


@dataclass(frozen=True)
class Idle:
    """No interaction in progress."""


@dataclass(frozen=True)
class Selected:
    """A square was tapped and waits for a target tap."""
    square: Square


@dataclass(frozen=True)
class Dragging:
    """A piece is being dragged.

    A rejected drag still tracks the pointer but never gets a drop target; it
    ends with the piece snapping back.
    """
    origin: Square
    piece: Optional[chess.Piece]
    drop_target: Optional[Square] = None
    rejected: bool = False


@dataclass(frozen=True)
class PromotionPrompt:
    """A pawn move suspended until the user picks a promotion piece."""
    piece: chess.Piece
    attempt: MoveAttempt  # Unpromoted move
    source_square: str  # e.g. "e7"
    target_square: str  # e.g. "e8"
    lan: str  # Unpromoted LAN, e.g. "e7e8"


@dataclass(frozen=True)
class AwaitingPromotion:
    """The promotion picker is open."""
    prompt: PromotionPrompt


InteractionState = Union[Idle, Selected, Dragging, AwaitingPromotion]

IDLE = Idle()


class InteractionModel(QObject):
    """Model holding the current interaction state and board settings.

    Exactly one InteractionState is current at a time. Every transition goes
    through set_state(), which publishes state_changed plus the narrower
    signals renderers usually bind to.
    """

    # Signals emitted when interaction state changes
    state_changed = pyqtSignal(object)  # Emitted with the new InteractionState
    selection_changed = pyqtSignal(object)  # Emitted with the selected Square or None
    drop_target_changed = pyqtSignal(object)  # Emitted with the drop target Square or None
    promotion_prompt_changed = pyqtSignal(object)  # Emitted with PromotionPrompt or None
    move_attempted = pyqtSignal(object)  # Emitted with a MoveEvent when an interaction completes
    board_size_changed = pyqtSignal(float)  # Emitted when the renderer reports a new board size

    def __init__(self, perspective: chess.Color = chess.WHITE, validate_moves: bool = False,
                 allow_opponent_move: bool = False) -> None:
        """Initialize the interaction model.

        Args:
            perspective: Side the board is viewed from; fixed for the model's lifetime.
            validate_moves: If True, only legal moves are emitted.
            allow_opponent_move: If True, pieces of the side not to move can be picked up.
        """
        super().__init__()
        self._perspective = perspective
        self.validate_moves = validate_moves
        self.allow_opponent_move = allow_opponent_move
        self._state: InteractionState = IDLE
        self._board_size: float = 0.0

    @property
    def perspective(self) -> chess.Color:
        """Side the board is viewed from."""
        return self._perspective

    @property
    def should_flip_board(self) -> bool:
        """Whether the renderer draws rank 1 at the top."""
        return self._perspective == chess.BLACK

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def selected_square(self) -> Optional[Square]:
        if isinstance(self._state, Selected):
            return self._state.square
        return None

    @property
    def drop_target(self) -> Optional[Square]:
        if isinstance(self._state, Dragging):
            return self._state.drop_target
        return None

    @property
    def promotion_prompt(self) -> Optional[PromotionPrompt]:
        if isinstance(self._state, AwaitingPromotion):
            return self._state.prompt
        return None

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    @property
    def show_promotion_picker(self) -> bool:
        return isinstance(self._state, AwaitingPromotion)

    @property
    def board_size(self) -> float:
        """Board edge length in pixels, as reported by the renderer."""
        return self._board_size

    @property
    def square_size(self) -> float:
        return self._board_size / 8

    def set_board_size(self, size: float) -> None:
        """Record the renderer's board size.

        Args:
            size: Board edge length in pixels.
        """
        if size != self._board_size:
            self._board_size = size
            self.board_size_changed.emit(float(size))

    def set_state(self, state: InteractionState) -> None:
        """Transition to a new state and publish the change.

        Args:
            state: The new InteractionState.
        """
        if state == self._state:
            return

        old_selected = self.selected_square
        old_drop_target = self.drop_target
        old_prompt = self.promotion_prompt

        self._state = state
        self.state_changed.emit(state)

        if self.selected_square != old_selected:
            self.selection_changed.emit(self.selected_square)
        if self.drop_target != old_drop_target:
            self.drop_target_changed.emit(self.drop_target)
        if self.promotion_prompt != old_prompt:
            self.promotion_prompt_changed.emit(self.promotion_prompt)
