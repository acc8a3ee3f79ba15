"""
🧪 Tests para Config
"""

import pytest

from config import DEFAULT_PORT, Config, parse_port


class TestConfigDefaults:

    def test_defaults_match_original_constants(self):
        config = Config.from_env({})

        assert config.host == '0.0.0.0'
        assert config.port == DEFAULT_PORT == 8080
        assert config.log_level == 'INFO'
        assert config.log_file is None
        assert config.address == '0.0.0.0:8080'


class TestConfigFromEnv:

    def test_environment_overrides(self):
        config = Config.from_env({
            'TENNIS_LOGGER_HOST': '127.0.0.1',
            'TENNIS_LOGGER_PORT': '9090',
            'TENNIS_LOGGER_LOG_LEVEL': 'debug',
            'TENNIS_LOGGER_LOG_FILE': '/tmp/tennis.log',
        })

        assert config.host == '127.0.0.1'
        assert config.port == 9090
        assert config.log_level == 'DEBUG'
        assert config.log_file == '/tmp/tennis.log'

    def test_empty_log_file_means_stdout(self):
        assert Config.from_env({'TENNIS_LOGGER_LOG_FILE': ''}).log_file is None

    @pytest.mark.parametrize('value', ['abc', '-1', '65536', ''])
    def test_invalid_port(self, value):
        with pytest.raises(ValueError):
            Config.from_env({'TENNIS_LOGGER_PORT': value})

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            Config.from_env({'TENNIS_LOGGER_LOG_LEVEL': 'ruidoso'})


class TestConfigFromArgs:

    def test_no_arguments_keeps_environment(self):
        config = Config.from_args([], environ={'TENNIS_LOGGER_PORT': '9000'})

        assert config.port == 9000

    def test_arguments_override_environment(self):
        config = Config.from_args(
            ['--port', '7000', '--host', 'localhost', '--log-level', 'warning'],
            environ={'TENNIS_LOGGER_PORT': '9000'},
        )

        assert config.port == 7000
        assert config.host == 'localhost'
        assert config.log_level == 'WARNING'

    def test_invalid_port_exits(self):
        with pytest.raises(SystemExit):
            Config.from_args(['--port', '70000'], environ={})


def test_parse_port_accepts_ephemeral():
    assert parse_port('0') == 0
