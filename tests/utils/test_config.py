import logging
import os
import unittest

from tputils.utils.config import Config, print_config

path = os.path.dirname(os.path.abspath(__file__)) + '/'


class TestConfig:
    def test_read_yaml_file(self, monkeypatch):
        monkeypatch.delenv('LOG_LEVEL', raising=False)
        monkeypatch.delenv('SHUFFLE_SEED', raising=False)
        config = Config(path + 'test.yaml')

        assert config.log_level == 'ERROR'
        assert config.abbrev_marker == '~'
        assert config.pad_char == '*'
        assert config.shuffle_seed == 42

    def test_missing_sections_use_defaults(self, monkeypatch):
        monkeypatch.delenv('LOG_LEVEL', raising=False)
        monkeypatch.delenv('SHUFFLE_SEED', raising=False)
        config = Config(path + 'test_partial.yaml')

        assert config.log_level == 'DEBUG'
        assert config.abbrev_marker == '...'
        assert config.pad_char == ' '
        assert config.shuffle_seed is None

    def test_missing_file_uses_defaults(self, monkeypatch):
        monkeypatch.delenv('LOG_LEVEL', raising=False)
        monkeypatch.delenv('SHUFFLE_SEED', raising=False)
        config = Config(path + 'does_not_exist.yaml')

        assert config.log_level == 'INFO'
        assert config.shuffle_seed is None

    class TestEnvOverrides:
        def test_log_level_from_env(self, monkeypatch):
            monkeypatch.setenv('LOG_LEVEL', 'WARNING')
            config = Config(path + 'test.yaml')

            assert config.log_level == 'WARNING'

        def test_shuffle_seed_from_env(self, monkeypatch):
            monkeypatch.setenv('SHUFFLE_SEED', '7')
            config = Config(path + 'test.yaml')

            assert config.shuffle_seed == 7

    def test_print_config(self, caplog, monkeypatch):
        monkeypatch.delenv('SHUFFLE_SEED', raising=False)
        config = Config(path + 'test.yaml')

        with caplog.at_level(logging.DEBUG, logger='tputils.utils.config'):
            print_config(config)

        assert 'Shuffle Seed: 42' in caplog.text


if __name__ == '__main__':
    unittest.main()
