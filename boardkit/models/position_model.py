"""Position model wrapping the python-chess board."""

from dataclasses import dataclass
from typing import Optional, FrozenSet

import chess
from PyQt6.QtCore import QObject, pyqtSignal

from boardkit.models.move_attempt import parse_lan
from boardkit.models.square import Square
from boardkit.services.fen_validation_service import FenValidationService
from boardkit.services.logging_service import LoggingService
from boardkit.utils.square_mapper import from_index, to_index


EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"
STARTING_FEN = chess.STARTING_FEN


@dataclass(frozen=True)
class MovingPieceTransition:
    """A piece sliding between two squares after the host applied a move."""
    piece: chess.Piece
    from_square: Square
    to_square: Square


class PositionModel(QObject):
    """Model holding the authoritative position using python-chess.

    The interaction layer only reads from this model (side to move, piece
    occupancy, legal moves). The host writes to it after receiving a move
    event, which makes the host the single writer of position state.
    """

    # Signals emitted when position state changes
    position_changed = pyqtSignal()  # Emitted when the board position is replaced
    turn_changed = pyqtSignal(bool)  # Emitted when turn changes (True=White, False=Black)
    last_move_changed = pyqtSignal(object)  # Emitted with the move that led to the position (chess.Move or None)
    moving_piece_changed = pyqtSignal(object)  # Emitted with MovingPieceTransition or None
    waiting_changed = pyqtSignal(bool)  # Emitted when the host starts/stops blocking input

    def __init__(self, fen: Optional[str] = None) -> None:
        """Initialize the position model.

        Args:
            fen: Optional FEN string. If None or invalid, starts with an empty board.
        """
        super().__init__()
        if fen is None:
            fen = EMPTY_FEN
        elif not self._is_acceptable_fen(fen):
            LoggingService.get_instance().warning(f"Invalid initial FEN, using empty board: {fen}")
            fen = EMPTY_FEN
        self._board = chess.Board(fen)
        self._current_move: Optional[chess.Move] = None
        self._previous_move: Optional[chess.Move] = None
        self._moving_piece: Optional[MovingPieceTransition] = None
        self._in_waiting = False

    @property
    def board(self) -> chess.Board:
        """Get the python-chess board instance.

        Callers must treat it as read-only; use set_fen() or apply_move() to change it.
        """
        return self._board

    @property
    def fen(self) -> str:
        """Current position as FEN string."""
        return self._board.fen()

    @property
    def turn(self) -> chess.Color:
        """Side to move."""
        return self._board.turn

    @property
    def current_move(self) -> Optional[chess.Move]:
        """Move that led to the current position, if the host supplied one."""
        return self._current_move

    @property
    def previous_move(self) -> Optional[chess.Move]:
        """Move that led to the position before the current one."""
        return self._previous_move

    @property
    def legal_moves(self) -> FrozenSet[chess.Move]:
        """Legal moves in the current position."""
        return frozenset(self._board.legal_moves)

    def piece_at(self, square: Square) -> Optional[chess.Piece]:
        """Get the piece on a square.

        Args:
            square: Logical square; off-board squares hold nothing.

        Returns:
            chess.Piece or None.
        """
        if not square.is_on_board:
            return None
        return self._board.piece_at(to_index(square))

    def is_legal(self, lan: str) -> bool:
        """Check whether a move in long algebraic notation is legal.

        Args:
            lan: Move text such as "e2e4" or "e7e8Q".

        Returns:
            True if legal; False for illegal or unparseable moves.
        """
        move = parse_lan(lan)
        if move is None:
            return False
        try:
            return self._board.is_legal(move)
        except (ValueError, IndexError) as e:
            LoggingService.get_instance().error(f"Legality query failed for {lan}", exc_info=e)
            return False

    def set_fen(self, fen: str, lan: Optional[str] = None) -> bool:
        """Replace the position.

        When lan is given, it is recorded as the current move and the piece
        standing on its origin square in the outgoing position becomes the
        moving-piece transition for the renderer to animate.

        Args:
            fen: FEN string of the new position.
            lan: Optional move that led to the new position.

        Returns:
            True if the position was replaced, False if the FEN was rejected.
        """
        if not self._is_acceptable_fen(fen):
            LoggingService.get_instance().warning(f"Rejected invalid FEN: {fen}")
            return False

        old_turn = self._board.turn

        self._previous_move = self._current_move
        self._current_move = parse_lan(lan) if lan is not None else None

        # Null moves ("0000") are falsy and carry no piece
        if self._current_move:
            piece = self._board.piece_at(self._current_move.from_square)
            if piece is not None:
                self._set_moving_piece(MovingPieceTransition(
                    piece=piece,
                    from_square=from_index(self._current_move.from_square),
                    to_square=from_index(self._current_move.to_square),
                ))

        self._board = chess.Board(fen)

        self.position_changed.emit()
        self.last_move_changed.emit(self._current_move)
        if old_turn != self._board.turn:
            self.turn_changed.emit(self._board.turn == chess.WHITE)
        return True

    def apply_move(self, move: chess.Move) -> bool:
        """Play a legal move on the current position.

        Convenience for hosts that accept a move event as-is.

        Args:
            move: Move to play.

        Returns:
            True if the move was legal and applied, False otherwise.
        """
        if not self._board.is_legal(move):
            LoggingService.get_instance().debug(f"Refusing to apply illegal move {move.uci()}")
            return False
        next_board = self._board.copy(stack=False)
        next_board.push(move)
        return self.set_fen(next_board.fen(), lan=move.uci())

    def reset_to_starting_position(self) -> None:
        """Reset to the standard starting position."""
        self.set_fen(STARTING_FEN)

    @property
    def moving_piece(self) -> Optional[MovingPieceTransition]:
        """The in-flight animated relocation, if any."""
        return self._moving_piece

    def finish_moving_piece(self) -> None:
        """Clear the moving-piece transition once the renderer's animation completes."""
        self._set_moving_piece(None)

    def _set_moving_piece(self, transition: Optional[MovingPieceTransition]) -> None:
        if transition == self._moving_piece:
            return
        self._moving_piece = transition
        self.moving_piece_changed.emit(transition)

    @property
    def in_waiting(self) -> bool:
        """Whether the host is blocking board input."""
        return self._in_waiting

    def begin_waiting(self) -> None:
        """Block board input, e.g. while an opponent is thinking."""
        if not self._in_waiting:
            self._in_waiting = True
            self.waiting_changed.emit(True)

    def end_waiting(self) -> None:
        """Unblock board input."""
        if self._in_waiting:
            self._in_waiting = False
            self.waiting_changed.emit(False)

    @staticmethod
    def _is_acceptable_fen(fen: str) -> bool:
        if not FenValidationService.validate(fen):
            return False
        try:
            chess.Board(fen)
        except ValueError:
            return False
        return True
