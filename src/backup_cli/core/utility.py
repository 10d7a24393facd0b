"""Resolve system utility names to absolute paths.

Resolved paths are memoized per resolver: the first successful lookup for a
name is final for the lifetime of the cache, even if $PATH or the filesystem
changes afterwards.
"""

import logging
import threading
from collections.abc import Mapping
from contextlib import AbstractContextManager

from backup_cli.core.errors import UtilityNotFoundError
from backup_cli.core.shell import Shell

logger = logging.getLogger(__name__)


class UtilityPathCache:
    """Write-once mapping of utility name to resolved absolute path.

    All access goes through the cache's lock. Use ``locked()`` to hold it
    across a lookup-then-store sequence.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._paths: dict[str, str] = dict(initial or {})
        # Reentrant: get/store run while the resolver holds locked().
        self._lock = threading.RLock()

    def locked(self) -> AbstractContextManager[bool]:
        return self._lock

    def get(self, name: str) -> str | None:
        with self._lock:
            return self._paths.get(name)

    def store(self, name: str, path: str) -> str:
        """Record a path for name unless one is already present.

        Returns:
            The path cached for name, which is the earlier one if name was
            already cached
        """
        with self._lock:
            return self._paths.setdefault(name, path)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)


class UtilityResolver:
    """Finds utilities on the search path and caches the results.

    Example:
        >>> resolver = UtilityResolver(RealShell())
        >>> resolver.utility("tar")
        '/usr/bin/tar'
    """

    def __init__(self, shell: Shell, cache: UtilityPathCache | None = None) -> None:
        self._shell = shell
        self._cache = cache if cache is not None else UtilityPathCache()

    @property
    def cache(self) -> UtilityPathCache:
        return self._cache

    def utility(self, name: str) -> str:
        """Return the absolute path of a utility.

        Args:
            name: Utility name; surrounding whitespace is ignored

        Returns:
            Absolute path to the utility

        Raises:
            UtilityNotFoundError: If name is empty, or the utility is not
                found on the search path
        """
        name = name.strip()
        if not name:
            raise UtilityNotFoundError("Utility Name Empty", name=name)

        with self._cache.locked():
            cached = self._cache.get(name)
            if cached is not None:
                logger.debug("Utility '%s' cached at %s", name, cached)
                return cached

            path = (self._shell.get_installed_tool_path(name) or "").rstrip()
            if not path:
                raise UtilityNotFoundError(
                    f"Could not locate '{name}'.\n"
                    f"Make sure the specified utility is installed\n"
                    f"and available in your system's $PATH.",
                    name=name,
                )

            logger.debug("Utility '%s' resolved to %s", name, path)
            return self._cache.store(name, path)
