"""Unit tests for configuration loading."""

import pytest
from pydantic import ValidationError

from lambda_fetch import config as config_module
from lambda_fetch.config import Settings, get_settings, settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test without a stray .env file or cached settings."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "LOG_LEVEL",
        "LAMBDA_FETCH_LOG_LEVEL",
        "LAMBDA_FETCH_DEST",
        "LAMBDA_FETCH_CREATE_PARENTS",
        "LAMBDA_FETCH_CONNECT_TIMEOUT",
        "LAMBDA_FETCH_READ_TIMEOUT",
        "LAMBDA_FETCH_DOWNLOAD_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_settings", None)


def test_defaults():
    config = get_settings()

    assert config.log_level == "INFO"
    assert config.default_dest == "output.zip"
    assert config.create_parents is False
    assert config.connect_timeout == 10.0
    assert config.read_timeout == 60.0
    assert config.download_timeout == 300.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LAMBDA_FETCH_DEST", "layer.zip")
    monkeypatch.setenv("LAMBDA_FETCH_CREATE_PARENTS", "true")
    monkeypatch.setenv("LAMBDA_FETCH_DOWNLOAD_TIMEOUT", "30")

    config = get_settings()

    assert config.log_level == "WARNING"
    assert config.default_dest == "layer.zip"
    assert config.create_parents is True
    assert config.download_timeout == 30.0


def test_prefixed_log_level_wins(monkeypatch):
    monkeypatch.setenv("LAMBDA_FETCH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    assert get_settings().log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("LAMBDA_FETCH_DEST=from-dotenv.zip\n")

    assert get_settings().default_dest == "from-dotenv.zip"


def test_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("LAMBDA_FETCH_CONNECT_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_settings_is_cached():
    assert settings() is settings()
