"""Search path lookups for executables.

This module abstracts executable lookup so the utility resolver can be
tested without depending on what is installed on the host.
"""

import shutil
from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface to the process's executable search path."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Find the absolute path of an executable on the search path.

        Args:
            tool_name: Bare executable name (e.g., "tar", "gpg")

        Returns:
            Absolute path to the executable, or None if it is not found
        """
        ...


class RealShell(Shell):
    """Production implementation using shutil.which against $PATH."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
