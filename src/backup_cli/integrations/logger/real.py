"""Production logger backed by the standard library logging module."""

import logging
import os

from backup_cli.integrations.logger.abc import Logger

LOGGER_NAME = "backup_cli"

DEBUG_ENV_VAR = "BACKUP_CLI_DEBUG"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str) -> None:
    """Install a stderr handler for backup_cli log output.

    Setting BACKUP_CLI_DEBUG in the environment overrides ``level`` and
    switches to a format that includes the logger name and line number.

    Args:
        level: One of the keys of LOG_LEVELS

    Raises:
        ValueError: If level is not a known level name
    """
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
        return

    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of: {', '.join(LOG_LEVELS)}")
    logging.basicConfig(level=LOG_LEVELS[level], format="[%(levelname)s] %(message)s")


class RealLogger(Logger):
    """Forwards messages to the ``backup_cli`` stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

    def message(self, text: str) -> None:
        self._logger.info(text)

    def warn(self, text: str) -> None:
        self._logger.warning(text)
