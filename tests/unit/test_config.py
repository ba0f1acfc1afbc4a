"""Test configuration loading and default values"""

import pytest

from reflectpattern.core.config import Config
from reflectpattern.shared.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def no_dotenv(mocker):
    """Keep a developer's .env file out of the tests"""
    return mocker.patch("reflectpattern.core.config.load_dotenv")


def test_config_default_values(clean_env):
    """Test that configuration has correct default values"""
    config = Config.from_env()

    assert config.channel == "sms"
    assert config.message == "Hello reflection!"
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_config_values_can_be_overridden(clean_env, tmp_path):
    """Test that values can be overridden via environment variables"""
    clean_env.setenv("REFLECT_CHANNEL", " Email ")
    clean_env.setenv("REFLECT_MESSAGE", "Hi there")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_FILE", str(tmp_path / "run.log"))

    config = Config.from_env()

    assert config.channel == "email"
    assert config.message == "Hi there"
    assert config.log_level == "DEBUG"
    assert config.log_file == str(tmp_path / "run.log")


def test_config_unknown_channel_raises(clean_env):
    clean_env.setenv("REFLECT_CHANNEL", "pigeon")

    with pytest.raises(ConfigurationError) as exc_info:
        Config.from_env()

    assert "pigeon" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_config_empty_log_file_is_unset(clean_env):
    clean_env.setenv("LOG_FILE", "")

    assert Config.from_env().log_file is None


def test_config_loads_dotenv(clean_env, no_dotenv):
    Config.from_env()

    no_dotenv.assert_called_once()


def test_log_summary(log_messages):
    Config(channel="email").log_summary()

    assert "Configuration loaded:" in log_messages[0]
    assert any("Channel: email" in m for m in log_messages)
