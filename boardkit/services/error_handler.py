"""Fatal error reporting for BoardKit entry points."""

import sys
import traceback
from typing import List, Optional

from boardkit.config.config_loader import ConfigError
from boardkit.services.logging_service import LoggingService


EXIT_FATAL = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


class ErrorHandler:
    """Turns an unrecoverable error into a stderr report and an exit code.

    A ConfigError means the board never started: it gets a one-paragraph
    report naming the config problem and EXIT_CONFIG. Anything else is a
    defect and gets the full traceback and EXIT_FATAL.
    """

    @staticmethod
    def exit_code_for(error: BaseException) -> int:
        """Get the process exit code for an error.

        Args:
            error: The exception that ended the program.

        Returns:
            EXIT_CONFIG for configuration errors, EXIT_FATAL otherwise.
        """
        if isinstance(error, ConfigError):
            return EXIT_CONFIG
        return EXIT_FATAL

    @staticmethod
    def format_report(error: BaseException, context: Optional[str] = None) -> List[str]:
        """Build the lines printed for an error.

        Args:
            error: The exception that ended the program.
            context: Optional description of what was running.

        Returns:
            Report lines without trailing newlines.
        """
        where = f" in {context}" if context else ""
        if isinstance(error, ConfigError):
            return [
                f"BoardKit configuration error{where}: {error}",
                "Fix config.json or pass a valid path to ConfigLoader.",
            ]

        lines = [f"BoardKit fatal error{where}: {type(error).__name__}: {error}", "Traceback:"]
        lines.extend(line.rstrip("\n") for line in
                     traceback.format_exception(type(error), error, error.__traceback__))
        return lines

    @staticmethod
    def handle_fatal_error(error: BaseException, context: Optional[str] = None) -> None:
        """Log and print an error, flush logging, and exit.

        Args:
            error: The exception that occurred.
            context: Optional context message describing where the error occurred.

        Raises:
            SystemExit: Always, with the code from exit_code_for().
        """
        logging_service = LoggingService.get_instance()
        if isinstance(error, ConfigError):
            logging_service.error(f"Configuration rejected: {error}")
        else:
            logging_service.error(f"Fatal error{f' in {context}' if context else ''}", exc_info=error)

        for line in ErrorHandler.format_report(error, context):
            print(line, file=sys.stderr)

        logging_service.shutdown()
        sys.exit(ErrorHandler.exit_code_for(error))

    @staticmethod
    def setup_exception_handler() -> None:
        """Install a global exception handler for uncaught exceptions."""
        def exception_handler(exc_type, exc_value, exc_traceback):
            if exc_type is KeyboardInterrupt:
                print("\nInterrupted by user.", file=sys.stderr)
                sys.exit(EXIT_INTERRUPTED)

            error = exc_value if exc_value else exc_type()
            ErrorHandler.handle_fatal_error(error, "uncaught exception")

        sys.excepthook = exception_handler
