"""Fake Logger implementation for testing.

FakeLogger records every logged line in memory, enabling assertions on
log output without touching the logging module.
"""

from backup_cli.integrations.logger.abc import Logger


class FakeLogger(Logger):
    """In-memory fake implementation that records log lines.

    This class has NO public setup methods. All state is captured during
    execution.
    """

    def __init__(self) -> None:
        """Create FakeLogger with empty line tracking."""
        self._lines: list[tuple[str, str]] = []

    @property
    def lines(self) -> list[tuple[str, str]]:
        """Get the (level, text) tuples that were logged, in order.

        Level is "message" or "warn".

        This property is for test assertions only.
        """
        return self._lines.copy()

    @property
    def messages(self) -> list[str]:
        """Get the text of informational lines. For test assertions only."""
        return [text for level, text in self._lines if level == "message"]

    @property
    def warnings(self) -> list[str]:
        """Get the text of warning lines. For test assertions only."""
        return [text for level, text in self._lines if level == "warn"]

    def message(self, text: str) -> None:
        self._lines.append(("message", text))

    def warn(self, text: str) -> None:
        self._lines.append(("warn", text))
