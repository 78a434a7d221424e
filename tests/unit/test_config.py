"""Tests for environment-based relay configuration."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from src.config import LOG_FORMAT, ConfigError, RelayConfig, configure_logging


def test_defaults_from_empty_environment() -> None:
    config = RelayConfig.from_env({})
    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.discord_webhook_url is None
    assert config.bot_username == "GitHub PR Bot"
    assert config.avatar_url is None
    assert config.forwarding_enabled is False


def test_reads_all_variables() -> None:
    config = RelayConfig.from_env({
        "PORT": "9000",
        "HOST": "127.0.0.1",
        "DISCORD_WEBHOOK_URL": "https://discord.test/api/webhooks/1/abc",
        "DISCORD_USERNAME": "PR Watch",
        "DISCORD_AVATAR_URL": "http://img/a.png",
    })
    assert config.port == 9000
    assert config.host == "127.0.0.1"
    assert config.discord_webhook_url == "https://discord.test/api/webhooks/1/abc"
    assert config.bot_username == "PR Watch"
    assert config.avatar_url == "http://img/a.png"
    assert config.forwarding_enabled is True


def test_empty_webhook_url_disables_forwarding() -> None:
    config = RelayConfig.from_env({"DISCORD_WEBHOOK_URL": ""})
    assert config.discord_webhook_url is None
    assert config.forwarding_enabled is False


def test_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8181")
    monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)
    config = RelayConfig.from_env()
    assert config.port == 8181
    assert config.discord_webhook_url is None


@pytest.mark.parametrize("raw", ["abc", "80.5", "0", "70000", "-1"])
def test_invalid_port_rejected(raw: str) -> None:
    with pytest.raises(ConfigError):
        RelayConfig.from_env({"PORT": raw})


def test_config_is_immutable() -> None:
    config = RelayConfig()
    with pytest.raises(AttributeError):
        config.port = 1  # type: ignore[misc]


def test_configure_logging_reads_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    with patch("src.config.logging.basicConfig") as mock_basic:
        configure_logging()
    mock_basic.assert_called_once_with(level="DEBUG", format=LOG_FORMAT)


def test_configure_logging_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    with patch("src.config.logging.basicConfig") as mock_basic:
        configure_logging("warning")
    mock_basic.assert_called_once_with(level="WARNING", format=LOG_FORMAT)


def test_configure_logging_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    with patch("src.config.logging.basicConfig") as mock_basic:
        configure_logging()
    mock_basic.assert_called_once_with(level="INFO", format=LOG_FORMAT)


def test_configure_logging_rejects_unknown_level() -> None:
    with patch("src.config.logging.basicConfig") as mock_basic:
        with pytest.raises(ConfigError):
            configure_logging("verbose")
    mock_basic.assert_not_called()
