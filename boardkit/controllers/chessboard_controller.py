"""Chessboard controller composing position, interaction, and highlights."""

from typing import Any, Callable, Dict, Optional, Union, Iterable

import chess

from boardkit.controllers.highlight_controller import HighlightController, SquareLike
from boardkit.controllers.interaction_controller import InteractionController
from boardkit.models.interaction_model import InteractionModel
from boardkit.models.move_attempt import MoveEvent
from boardkit.models.position_model import PositionModel
from boardkit.models.theme import ChessboardTheme, ColorScheme, PieceStyle, ThemeModel, theme_from_config
from boardkit.services.logging_service import LoggingService


class ChessboardController:
    """Controller for one interactive chessboard.

    This controller builds the board's models from configuration and wires
    the interaction and highlight controllers to them. Renderers observe the
    models' signals; hosts listen to move events and write positions back
    through set_fen() or apply_move().
    """

    def __init__(self, config: Dict[str, Any], on_move: Optional[Callable[[MoveEvent], None]] = None) -> None:
        """Initialize the chessboard controller.

        Args:
            config: Configuration dictionary.
            on_move: Optional listener for move events.
        """
        self.config = config

        board_config = config.get('board', {})
        hints_config = config.get('hints', {})

        perspective = chess.BLACK if board_config.get('perspective', 'white') == 'black' else chess.WHITE
        self.hint_duration_seconds = hints_config.get('default_duration_seconds', 1.5)
        self.moving_piece_duration_ms = board_config.get('animation', {}).get('moving_piece_duration_ms', 500)

        # Initialize models
        self.position_model = PositionModel(fen=board_config.get('initial_fen', None))
        self.interaction_model = InteractionModel(
            perspective=perspective,
            validate_moves=board_config.get('validate_moves', False),
            allow_opponent_move=board_config.get('allow_opponent_move', False),
        )
        self.theme_model = ThemeModel(theme_from_config(board_config.get('theme', {})))

        # Initialize controllers
        self.interaction_controller = InteractionController(self.position_model, self.interaction_model, on_move)
        self.highlight_controller = HighlightController()

        LoggingService.get_instance().debug(
            f"Chessboard initialized: perspective={'black' if perspective == chess.BLACK else 'white'}, "
            f"validate_moves={self.interaction_model.validate_moves}, "
            f"allow_opponent_move={self.interaction_model.allow_opponent_move}"
        )

    def get_position_model(self) -> PositionModel:
        return self.position_model

    def get_interaction_model(self) -> InteractionModel:
        return self.interaction_model

    def get_highlight_model(self):
        return self.highlight_controller.get_highlight_model()

    def get_theme_model(self) -> ThemeModel:
        return self.theme_model

    @property
    def fen(self) -> str:
        return self.position_model.fen

    def set_fen(self, fen: str, lan: Optional[str] = None) -> bool:
        """Replace the position, cancelling any interaction against the old one.

        Args:
            fen: FEN string of the new position.
            lan: Optional move that led to it, animated by the renderer.

        Returns:
            True if the FEN was accepted.
        """
        if not self.position_model.set_fen(fen, lan=lan):
            return False
        self.interaction_controller.cancel()
        return True

    def apply_move(self, event: MoveEvent) -> bool:
        """Apply a move event to the position if it is legal.

        Args:
            event: Event received from move_attempted.

        Returns:
            True if the move was applied.
        """
        if not event.is_legal:
            return False
        if not self.position_model.apply_move(event.move):
            return False
        self.interaction_controller.cancel()
        return True

    def set_board_size(self, size: float) -> None:
        """Record the rendered board size used for drag arithmetic."""
        self.interaction_model.set_board_size(size)

    def deselect(self) -> None:
        self.interaction_controller.deselect()

    def hint(self, squares: Union[SquareLike, Iterable[SquareLike]], seconds: Optional[float] = None) -> None:
        """Hint squares, optionally clearing them after a delay.

        Args:
            squares: Square(s) or algebraic name(s).
            seconds: Delay before clearing; None hints until clear_hint().
        """
        if seconds is None:
            self.highlight_controller.hint(squares)
        else:
            self.highlight_controller.hint_for(squares, seconds)

    def flash_hint(self, squares: Union[SquareLike, Iterable[SquareLike]]) -> None:
        """Hint squares for the configured default duration."""
        self.highlight_controller.hint_for(squares, self.hint_duration_seconds)

    def clear_hint(self) -> None:
        self.highlight_controller.clear_hint()

    def begin_waiting(self) -> None:
        self.position_model.begin_waiting()

    def end_waiting(self) -> None:
        self.position_model.end_waiting()

    def set_theme(self, theme: ChessboardTheme) -> None:
        self.theme_model.set_theme(theme)

    def set_color_scheme(self, color_scheme: ColorScheme) -> None:
        self.theme_model.set_color_scheme(color_scheme)

    def set_piece_style(self, piece_style: PieceStyle) -> None:
        self.theme_model.set_piece_style(piece_style)
