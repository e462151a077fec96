"""Headless demo for BoardKit: drives a board with scripted input events.

Plays 1. e4 by two taps and 1... e5 by a drag, answering each move event the
way a host would, then flashes a hint and exits when it expires.
"""

import sys
from PyQt6.QtCore import QCoreApplication, QTimer

from boardkit.config.config_loader import ConfigLoader
from boardkit.controllers.chessboard_controller import ChessboardController
from boardkit.models.move_attempt import MoveEvent
from boardkit.models.position_model import STARTING_FEN
from boardkit.services.error_handler import ErrorHandler
from boardkit.services.logging_service import LoggingService
from boardkit.utils.square_mapper import from_algebraic


BOARD_SIZE = 640


def main() -> None:
    """Run the BoardKit demo."""
    ErrorHandler.setup_exception_handler()

    try:
        app = QCoreApplication(sys.argv)
        app.setApplicationName("BoardKit")

        config = ConfigLoader().load()
        LoggingService.get_instance(config)

        board = ChessboardController(config)
        board.set_fen(STARTING_FEN)
        board.set_board_size(BOARD_SIZE)

        def on_move(event: MoveEvent) -> None:
            print(f"move {event.lan}: legal={event.is_legal}")
            if board.apply_move(event):
                # Stand-in for the renderer finishing its slide animation
                QTimer.singleShot(board.moving_piece_duration_ms, board.position_model.finish_moving_piece)

        board.interaction_model.move_attempted.connect(on_move)

        def play_white() -> None:
            board.interaction_controller.tap(from_algebraic("e2"))
            board.interaction_controller.tap(from_algebraic("e4"))

        def play_black() -> None:
            square_size = BOARD_SIZE / 8
            board.interaction_controller.drag_begin(from_algebraic("e7"))
            board.interaction_controller.drag_change(0, square_size)
            board.interaction_controller.drag_end(0, square_size * 2)

        def show_hint() -> None:
            board.hint(["d4", "f4"], seconds=1.0)
            print(f"hinted: {sorted(square.id for square in board.get_highlight_model().hinted_squares)}")

        def finish() -> None:
            print(f"final position: {board.fen}")
            print(f"hints left: {len(board.get_highlight_model().hinted_squares)}")
            app.quit()

        QTimer.singleShot(0, play_white)
        QTimer.singleShot(board.moving_piece_duration_ms + 100, play_black)
        QTimer.singleShot(2 * board.moving_piece_duration_ms + 200, show_hint)
        QTimer.singleShot(2 * board.moving_piece_duration_ms + 1400, finish)

        exit_code = app.exec()
        LoggingService.get_instance().shutdown()
        sys.exit(exit_code)
    except Exception as e:
        ErrorHandler.handle_fatal_error(e, "demo")


if __name__ == "__main__":
    main()
