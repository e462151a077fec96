"""Configuration loader with strict validation."""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from boardkit.utils.path_resolver import get_package_resource_path


DEFAULT_CONFIG_PATH = "config/config.json"

PERSPECTIVES = ("white", "black")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(ValueError):
    """Raised when the configuration file is missing or invalid."""


class ConfigLoader:
    """Loads config.json and validates the sections BoardKit reads.

    Validation is strict: a missing section or a value of the wrong type
    raises ConfigError instead of silently falling back to a default.
    """

    REQUIRED_SECTIONS = ('board', 'hints', 'logging')

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize the loader.

        Args:
            config_path: Path to a config.json file. Defaults to the bundled config.
        """
        if config_path is None:
            config_path = get_package_resource_path(DEFAULT_CONFIG_PATH)
        self.config_path = Path(config_path)

    def load(self) -> Dict[str, Any]:
        """Load and validate the configuration.

        Returns:
            Configuration dictionary.

        Raises:
            ConfigError: If the file cannot be read or fails validation.
        """
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {self.config_path}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file is not valid JSON: {self.config_path}: {e}")

        self.validate(config)
        return config

    @classmethod
    def validate(cls, config: Any) -> None:
        """Validate a configuration dictionary.

        Args:
            config: Parsed configuration.

        Raises:
            ConfigError: On the first invalid entry found.
        """
        if not isinstance(config, dict):
            raise ConfigError("Configuration root must be an object")

        for section in cls.REQUIRED_SECTIONS:
            if not isinstance(config.get(section), dict):
                raise ConfigError(f"Missing or invalid configuration section: '{section}'")

        board = config['board']
        cls._require_type(board, 'board', 'initial_fen', str)
        cls._require_type(board, 'board', 'validate_moves', bool)
        cls._require_type(board, 'board', 'allow_opponent_move', bool)
        perspective = cls._require_type(board, 'board', 'perspective', str)
        if perspective not in PERSPECTIVES:
            raise ConfigError(f"board.perspective must be one of {PERSPECTIVES}, got '{perspective}'")

        theme = board.get('theme', {})
        if not isinstance(theme, dict):
            raise ConfigError("board.theme must be an object")
        for key in ('color_scheme', 'piece_style'):
            if key in theme and not isinstance(theme[key], str):
                raise ConfigError(f"board.theme.{key} must be a string")

        hints = config['hints']
        duration = cls._require_type(hints, 'hints', 'default_duration_seconds', (int, float))
        if isinstance(duration, bool) or duration <= 0:
            raise ConfigError("hints.default_duration_seconds must be a positive number")

        logging_config = config['logging']
        for channel in ('console', 'file'):
            channel_config = logging_config.get(channel, {})
            if not isinstance(channel_config, dict):
                raise ConfigError(f"logging.{channel} must be an object")
            level = channel_config.get('level', 'INFO')
            if str(level).upper() not in LOG_LEVELS:
                raise ConfigError(f"logging.{channel}.level must be one of {LOG_LEVELS}, got '{level}'")

    @staticmethod
    def _require_type(section: Dict[str, Any], section_name: str, key: str, expected_type) -> Any:
        if key not in section:
            raise ConfigError(f"Missing configuration value: {section_name}.{key}")
        value = section[key]
        if not isinstance(value, expected_type):
            raise ConfigError(f"Invalid type for {section_name}.{key}: {type(value).__name__}")
        return value
