from backup_cli.integrations.logger.abc import Logger
from backup_cli.integrations.logger.real import RealLogger, configure_logging

__all__ = [
    "Logger",
    "RealLogger",
    "configure_logging",
]
