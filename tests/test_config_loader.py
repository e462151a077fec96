"""Unit tests for configuration loading and validation."""

import copy
import json
import tempfile
import unittest
from pathlib import Path

from boardkit.config.config_loader import ConfigError, ConfigLoader


class TestConfigLoader(unittest.TestCase):
    """Bundled config and validation failures."""

    @classmethod
    def setUpClass(cls):
        cls.default_config = ConfigLoader().load()

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def write_config(self, config, text=None):
        path = Path(self.tmp_dir.name) / "config.json"
        path.write_text(text if text is not None else json.dumps(config), encoding='utf-8')
        return path

    def modified(self, section, key, value):
        config = copy.deepcopy(self.default_config)
        config[section][key] = value
        return config

    def test_bundled_config_loads(self):
        config = self.default_config
        self.assertEqual(config['board']['perspective'], 'white')
        self.assertFalse(config['board']['validate_moves'])
        self.assertFalse(config['logging']['file']['enabled'])
        self.assertGreater(config['hints']['default_duration_seconds'], 0)

    def test_loads_from_explicit_path(self):
        config = self.modified('board', 'perspective', 'black')
        loaded = ConfigLoader(self.write_config(config)).load()
        self.assertEqual(loaded['board']['perspective'], 'black')

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader(Path(self.tmp_dir.name) / "missing.json").load()

    def test_invalid_json(self):
        with self.assertRaises(ConfigError):
            ConfigLoader(self.write_config(None, text="{not json")).load()

    def test_missing_section(self):
        config = copy.deepcopy(self.default_config)
        del config['hints']
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(config)

    def test_root_must_be_object(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.validate([])

    def test_bad_perspective(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(self.modified('board', 'perspective', 'red'))

    def test_bad_flag_type(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(self.modified('board', 'validate_moves', 'yes'))

    def test_missing_value(self):
        config = copy.deepcopy(self.default_config)
        del config['board']['initial_fen']
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(config)

    def test_bad_hint_duration(self):
        for value in (0, -1.5, True, "1.5"):
            with self.subTest(value=value):
                with self.assertRaises(ConfigError):
                    ConfigLoader.validate(self.modified('hints', 'default_duration_seconds', value))

    def test_bad_log_level(self):
        config = copy.deepcopy(self.default_config)
        config['logging']['console']['level'] = 'CHATTY'
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(config)

    def test_bad_theme(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.validate(self.modified('board', 'theme', 'wood'))

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))


if __name__ == '__main__':
    unittest.main()
