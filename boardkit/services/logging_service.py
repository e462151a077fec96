"""Logging service for centralized library logging."""

import sys
import queue
import threading
import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Any, Optional, List
from datetime import datetime

from boardkit.utils.path_resolver import resolve_data_file_path


LOGGER_NAME = 'BoardKit'
CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


class LoggingService:
    """Service for centralized logging.

    This service provides:
    - Console and/or file output (configurable)
    - Log levels DEBUG, INFO, WARNING, ERROR
    - Rolling log files (size-based rotation)
    - Non-blocking logging via QueueHandler/QueueListener, so handlers never
      run on the UI thread

    This is a singleton service - use get_instance() to get the shared instance.
    """

    _instance: Optional['LoggingService'] = None
    _lock = threading.Lock()

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the logging service.

        Args:
            config: Configuration dictionary.
        """
        self.config = config or {}
        self._logger: Optional[logging.Logger] = None
        self._queue: Optional[queue.Queue] = None
        self._listener: Optional[logging.handlers.QueueListener] = None
        self._initialized = False
        self._log_path: Optional[Path] = None
        self._instance_lock = threading.RLock()

        self._load_config()

    @classmethod
    def get_instance(cls, config: Optional[Dict[str, Any]] = None) -> 'LoggingService':
        """Get the singleton instance of LoggingService.

        Args:
            config: Configuration dictionary. If provided and instance exists, updates the instance's config.

        Returns:
            The singleton LoggingService instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(config)
        elif config is not None:
            with cls._instance._instance_lock:
                cls._instance.config = config
                cls._instance._load_config()
                if cls._instance._initialized:
                    cls._instance.shutdown()
                    cls._instance.initialize()
        return cls._instance

    def _load_config(self) -> None:
        """Load logging configuration from config dictionary."""
        logging_config = self.config.get('logging', {})

        console_config = logging_config.get('console', {})
        self._console_enabled = console_config.get('enabled', True)
        self._console_level = console_config.get('level', 'WARNING')

        # File logging is opt-in: a library must not write files unless asked to
        file_config = logging_config.get('file', {})
        self._file_enabled = bool(file_config.get('enabled', False))
        self._file_level = file_config.get('level', 'DEBUG')
        self._log_filename = file_config.get('filename', 'boardkit.log')
        self._max_size_mb = file_config.get('max_size_mb', 10)
        self._backup_count = file_config.get('backup_count', 5)

    def initialize(self) -> None:
        """Initialize the logging service.

        Sets up the logger, its queue handler, and the queue listener that
        owns the console and file handlers.
        """
        with self._instance_lock:
            if self._initialized:
                return

            self._logger = logging.getLogger(LOGGER_NAME)
            self._logger.setLevel(logging.DEBUG)
            self._logger.propagate = False
            for handler in self._logger.handlers[:]:
                self._logger.removeHandler(handler)

            handlers = self._build_handlers()
            if handlers:
                self._queue = queue.Queue()
                self._logger.addHandler(logging.handlers.QueueHandler(self._queue))
                self._listener = logging.handlers.QueueListener(self._queue, *handlers, respect_handler_level=True)
                self._listener.start()

            self._initialized = True

        if self._file_enabled and self._log_path:
            self.debug(f"Log file path resolved: filename={self._log_filename}, path={self._log_path}")

    def _build_handlers(self) -> List[logging.Handler]:
        """Create the console and file handlers enabled by configuration."""
        handlers: List[logging.Handler] = []

        if self._console_enabled:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self._get_log_level(self._console_level))
            console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            handlers.append(console_handler)

        if self._file_enabled:
            try:
                if self._log_path is None:
                    date = datetime.now().strftime('%Y-%m-%d')
                    if '.' in self._log_filename:
                        name, ext = self._log_filename.rsplit('.', 1)
                        timestamped_filename = f"{name}_{date}.{ext}"
                    else:
                        timestamped_filename = f"{self._log_filename}_{date}"
                    self._log_path = resolve_data_file_path(timestamped_filename)

                self._log_path.parent.mkdir(parents=True, exist_ok=True)

                file_handler = logging.handlers.RotatingFileHandler(
                    str(self._log_path),
                    maxBytes=self._max_size_mb * 1024 * 1024,
                    backupCount=self._backup_count,
                    encoding='utf-8'
                )
                file_handler.setLevel(self._get_log_level(self._file_level))
                file_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                handlers.append(file_handler)
            except OSError as e:
                print(f"Warning: Failed to initialize file logging: {e}", file=sys.stderr)

        return handlers

    def _get_log_level(self, level_str: str) -> int:
        """Convert log level string to logging constant.

        Args:
            level_str: Log level string (DEBUG, INFO, WARNING, ERROR).

        Returns:
            Logging level constant.
        """
        level_map = {
            'DEBUG': logging.DEBUG,
            'INFO': logging.INFO,
            'WARNING': logging.WARNING,
            'ERROR': logging.ERROR,
        }
        return level_map.get(str(level_str).upper(), logging.INFO)

    def _log(self, level: int, message: str, exc_info: Optional[Exception] = None) -> None:
        """Internal logging method.

        Args:
            level: Logging level constant.
            message: Log message.
            exc_info: Optional exception info for error logging.
        """
        if not self._initialized:
            self.initialize()

        if self._logger is None or not self._logger.handlers:
            return

        exc_info_param = None
        if exc_info is not None:
            if exc_info.__traceback__ is not None:
                exc_info_param = (type(exc_info), exc_info, exc_info.__traceback__)
            else:
                message = f"{message}\nException: {type(exc_info).__name__}: {exc_info}"

        self._logger.log(level, message, exc_info=exc_info_param)

    def debug(self, message: str) -> None:
        """Log a DEBUG level message."""
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        """Log an INFO level message."""
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        """Log a WARNING level message."""
        self._log(logging.WARNING, message)

    def error(self, message: str, exc_info: Optional[Exception] = None) -> None:
        """Log an ERROR level message.

        Args:
            message: Error message.
            exc_info: Optional exception to include traceback.
        """
        self._log(logging.ERROR, message, exc_info=exc_info)

    @property
    def log_path(self) -> Optional[Path]:
        """Path of the active log file, if file logging is enabled."""
        return self._log_path

    def shutdown(self) -> None:
        """Shutdown the logging service gracefully.

        Flushes pending records and stops the queue listener.
        """
        with self._instance_lock:
            if not self._initialized:
                return

            if self._listener is not None:
                self._listener.stop()
                for handler in self._listener.handlers:
                    handler.close()
                self._listener = None
            self._queue = None

            if self._logger:
                for handler in self._logger.handlers[:]:
                    handler.close()
                    self._logger.removeHandler(handler)

            self._initialized = False
