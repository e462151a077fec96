"""Interaction controller implementing the board's move state machine."""

from typing import Callable, Optional

import chess

from boardkit.models.interaction_model import (
    IDLE, AwaitingPromotion, Dragging, Idle, InteractionModel, InteractionState, PromotionPrompt, Selected,
)
from boardkit.models.move_attempt import (
    PROMOTION_PIECE_TYPES, MoveAttempt, MoveEvent, parse_promotion_kind, promotion_letter,
)
from boardkit.models.position_model import PositionModel
from boardkit.models.square import Square
from boardkit.services.logging_service import LoggingService
from boardkit.utils.square_mapper import square_from_offset, to_algebraic


class InteractionController:
    """Controller turning taps, drags, and promotion choices into move events.

    States: Idle -> Selected -> (Dragging | AwaitingPromotion) -> Idle, with
    Dragging also reachable from Idle. Each input method runs to a resting
    state synchronously. Legality is only ever queried from the position
    model; applying a move is left to whoever listens to move_attempted.
    """

    def __init__(self, position_model: PositionModel, interaction_model: InteractionModel,
                 on_move: Optional[Callable[[MoveEvent], None]] = None) -> None:
        """Initialize the interaction controller.

        Args:
            position_model: Model owning the authoritative position.
            interaction_model: Model holding interaction state.
            on_move: Optional listener connected to move_attempted.
        """
        self.position_model = position_model
        self.interaction_model = interaction_model
        self._logger = LoggingService.get_instance()
        if on_move is not None:
            self.interaction_model.move_attempted.connect(on_move)

    def get_interaction_model(self) -> InteractionModel:
        """Get the interaction model.

        Returns:
            The InteractionModel instance for observing interaction state.
        """
        return self.interaction_model

    def _input_blocked(self) -> bool:
        return self.position_model.moving_piece is not None or self.position_model.in_waiting

    def _snap_back(self, source: str) -> None:
        # The host blocked input after the gesture started; drop it unresolved
        self._logger.debug(f"Input blocked, discarding {source}")
        self._set_state(IDLE)

    def _set_state(self, state: InteractionState) -> None:
        self._logger.debug(f"Interaction state: {type(self.interaction_model.state).__name__} -> {type(state).__name__}")
        self.interaction_model.set_state(state)

    # Taps

    def tap(self, square: Square) -> None:
        """Handle a tap on a square.

        Args:
            square: Logical square that was tapped.
        """
        if self._input_blocked() or not square.is_on_board:
            return

        state = self.interaction_model.state
        if isinstance(state, Selected):
            if state.square == square:
                self._set_state(IDLE)
            else:
                self._finalize(state.square, square)
            return

        if not isinstance(state, Idle):
            return

        piece = self.position_model.piece_at(square)
        if piece is None:
            return
        if piece.color != self.position_model.turn and not self.interaction_model.allow_opponent_move:
            return
        self._set_state(Selected(square))

    def deselect(self) -> None:
        """Clear the current selection, if any."""
        if isinstance(self.interaction_model.state, Selected):
            self._set_state(IDLE)

    # Drags

    def drag_begin(self, square: Square) -> None:
        """Start dragging from a square.

        Ignored while a moving-piece transition is in flight. A drag that may
        not move the piece is still tracked as rejected so it can snap back.

        Args:
            square: Logical square the drag started on.
        """
        if self._input_blocked() or not square.is_on_board:
            return
        if isinstance(self.interaction_model.state, AwaitingPromotion):
            return

        piece = self.position_model.piece_at(square)
        rejected = piece is None or (
            piece.color != self.position_model.turn
            and not self.interaction_model.allow_opponent_move
            and piece.color != self.interaction_model.perspective
        )
        self._set_state(Dragging(origin=square, piece=piece, rejected=rejected))

    def drag_change(self, dx: float, dy: float) -> None:
        """Update the drop target from the pointer's offset.

        Args:
            dx: Horizontal pixel offset from the drag origin.
            dy: Vertical pixel offset from the drag origin.
        """
        state = self.interaction_model.state
        if not isinstance(state, Dragging):
            return
        if self._input_blocked():
            self._snap_back("drag change")
            return
        if state.rejected:
            return
        target = self._drop_square(state.origin, dx, dy)
        drop_target = target if target.is_on_board else None
        if drop_target != state.drop_target:
            self._set_state(Dragging(origin=state.origin, piece=state.piece, drop_target=drop_target))

    def drag_end(self, dx: float, dy: float) -> None:
        """Finish a drag and resolve the move.

        Args:
            dx: Final horizontal pixel offset from the drag origin.
            dy: Final vertical pixel offset from the drag origin.
        """
        state = self.interaction_model.state
        if not isinstance(state, Dragging):
            return
        if self._input_blocked():
            self._snap_back("drag end")
            return
        if state.rejected:
            self._set_state(IDLE)
            return
        self._finalize(state.origin, self._drop_square(state.origin, dx, dy))

    def _drop_square(self, origin: Square, dx: float, dy: float) -> Square:
        return square_from_offset(origin, dx, dy, self.interaction_model.perspective,
                                  self.interaction_model.square_size)

    # Promotion

    def choose_promotion(self, kind) -> None:
        """Complete a suspended promotion.

        Args:
            kind: Queen, rook, bishop or knight, as a python-chess piece type
                or a letter. Other values are ignored.
        """
        prompt = self.interaction_model.promotion_prompt
        if prompt is None:
            return
        if self._input_blocked():
            self._snap_back("promotion choice")
            return
        piece_type = parse_promotion_kind(kind)
        if piece_type is None:
            self._logger.warning(f"Ignoring invalid promotion choice: {kind!r}")
            return

        attempt = MoveAttempt(prompt.attempt.from_square, prompt.attempt.to_square, piece_type)
        lan = prompt.lan + promotion_letter(piece_type)
        is_legal = self.position_model.is_legal(lan)

        self._set_state(IDLE)
        self._emit(attempt, is_legal, prompt.source_square, prompt.target_square, lan, piece_type)

    def dismiss_promotion(self) -> None:
        """Close the promotion picker without moving."""
        if isinstance(self.interaction_model.state, AwaitingPromotion):
            self._set_state(IDLE)

    def cancel(self) -> None:
        """Drop any interaction in progress without emitting."""
        self._set_state(IDLE)

    # Resolution

    @staticmethod
    def is_promotable(piece: chess.Piece, target: Square) -> bool:
        """Whether moving piece to target needs a promotion choice.

        Args:
            piece: Piece being moved.
            target: Destination square.

        Returns:
            True for a pawn reaching the last rank of its color.
        """
        if piece.piece_type != chess.PAWN:
            return False
        return target.row == (7 if piece.color == chess.WHITE else 0)

    def _finalize(self, source: Square, target: Square) -> None:
        """Resolve a (source, target) pair from two taps or a drag."""
        piece = self.position_model.piece_at(source)
        if piece is None or not target.is_on_board or target == source:
            self._set_state(IDLE)
            return

        attempt = MoveAttempt(source, target)
        source_text = to_algebraic(source)
        target_text = to_algebraic(target)
        lan = attempt.lan
        is_legal = self.position_model.is_legal(lan)

        if self.is_promotable(piece, target) and any(
            self.position_model.is_legal(lan + promotion_letter(piece_type))
            for piece_type in PROMOTION_PIECE_TYPES
        ):
            prompt = PromotionPrompt(piece=piece, attempt=attempt, source_square=source_text,
                                     target_square=target_text, lan=lan)
            self._set_state(AwaitingPromotion(prompt))
            return

        self._set_state(IDLE)
        if not self.interaction_model.validate_moves or is_legal:
            self._emit(attempt, is_legal, source_text, target_text, lan, None)
        else:
            self._logger.debug(f"Dropped illegal move {lan} (move validation enabled)")

    def _emit(self, attempt: MoveAttempt, is_legal: bool, source_text: str, target_text: str,
              lan: str, promotion: Optional[chess.PieceType]) -> None:
        event = MoveEvent(
            attempt=attempt,
            move=attempt.to_move(),
            is_legal=is_legal,
            source_square=source_text,
            target_square=target_text,
            lan=lan,
            promotion=promotion,
        )
        self._logger.info(f"Move attempted: {lan} (legal={is_legal})")
        self.interaction_model.move_attempted.emit(event)
