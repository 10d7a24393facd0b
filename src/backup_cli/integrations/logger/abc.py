"""Logging abstraction for system utility output.

The runner reports progress and captured process output through this
interface, so tests can assert on log lines without configuring handlers.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Abstract leveled logger for dependency injection."""

    @abstractmethod
    def message(self, text: str) -> None:
        """Log an informational line.

        Args:
            text: Text to log, without trailing newline
        """
        ...

    @abstractmethod
    def warn(self, text: str) -> None:
        """Log a warning line.

        Args:
            text: Text to log, without trailing newline
        """
        ...
