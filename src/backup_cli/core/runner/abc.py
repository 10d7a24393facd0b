"""Abstract command runner interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Output of a process that ran to completion.

    Attributes:
        stdout: Captured standard output, whitespace-trimmed
        stderr: Captured standard error, whitespace-trimmed
        exit_status: Process exit status (negative if killed by a signal)
    """

    stdout: str
    stderr: str
    exit_status: int


class CommandRunner(ABC):
    """Abstract interface for running system commands.

    This abstraction lets backup steps be tested without spawning processes.
    """

    @abstractmethod
    def run(self, command: str) -> str:
        """Run a command line through the shell and return its output.

        All output is logged. Output on stderr is logged as warnings but does
        not by itself fail the command.

        Args:
            command: Full command line. It is passed to the shell unmodified;
                quoting and escaping are the caller's responsibility.

        Returns:
            Captured stdout, with leading and trailing whitespace removed

        Raises:
            SystemCallError: If the command could not be executed or exited
                with a non-zero status
        """
        ...
