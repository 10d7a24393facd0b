"""Tests for the logger integration."""

import logging
from unittest.mock import patch

import pytest

from backup_cli.integrations.logger.fake import FakeLogger
from backup_cli.integrations.logger.real import LOGGER_NAME, RealLogger, configure_logging


def test_real_logger_message_logs_at_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    RealLogger().message("Running system utility 'tar'...")

    assert caplog.record_tuples == [
        (LOGGER_NAME, logging.INFO, "Running system utility 'tar'..."),
    ]


def test_real_logger_warn_logs_at_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    RealLogger().warn("tar:STDERR: Removing leading `/'")

    assert caplog.record_tuples == [
        (LOGGER_NAME, logging.WARNING, "tar:STDERR: Removing leading `/'"),
    ]


def test_real_logger_accepts_custom_logger(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="custom")

    RealLogger(logging.getLogger("custom")).message("hello")

    assert caplog.record_tuples == [("custom", logging.INFO, "hello")]


def test_configure_logging_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BACKUP_CLI_DEBUG", raising=False)

    with pytest.raises(ValueError, match="Unknown log level 'loud'"):
        configure_logging("loud")


def test_fake_logger_records_lines_in_order() -> None:
    logger = FakeLogger()

    logger.message("one")
    logger.warn("two")
    logger.message("three")

    assert logger.lines == [("message", "one"), ("warn", "two"), ("message", "three")]
    assert logger.messages == ["one", "three"]
    assert logger.warnings == ["two"]


def test_fake_logger_lines_returns_copy() -> None:
    logger = FakeLogger()
    logger.message("one")

    lines = logger.lines
    lines.append(("warn", "extra"))

    assert logger.lines == [("message", "one")]


def test_configure_logging_uses_requested_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BACKUP_CLI_DEBUG", raising=False)

    with patch("backup_cli.integrations.logger.real.logging.basicConfig") as mock_config:
        configure_logging("warning")

    mock_config.assert_called_once_with(
        level=logging.WARNING, format="[%(levelname)s] %(message)s"
    )


def test_configure_logging_debug_env_var_overrides_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKUP_CLI_DEBUG", "1")

    with patch("backup_cli.integrations.logger.real.logging.basicConfig") as mock_config:
        # An unknown level is not rejected because the debug override wins
        configure_logging("loud")

    mock_config.assert_called_once_with(
        level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s"
    )


def test_configure_logging_empty_debug_env_var_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKUP_CLI_DEBUG", "")

    with patch("backup_cli.integrations.logger.real.logging.basicConfig") as mock_config:
        configure_logging("info")

    assert mock_config.call_args.kwargs["level"] == logging.INFO
