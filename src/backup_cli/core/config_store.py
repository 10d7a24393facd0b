"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.backup/config.toml.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from backup_cli.integrations.logger.real import LOG_LEVELS


@dataclass(frozen=True)
class BackupConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in BackupContext.

    Attributes:
        log_level: Name of the minimum level that is logged
        utility_paths: Utility name to absolute path. These paths are used
            instead of searching $PATH.
    """

    log_level: str = "info"
    utility_paths: dict[str, str] = field(default_factory=dict)


class ConfigStore(ABC):
    """Abstract interface for config access.

    Enables in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if config exists."""
        ...

    @abstractmethod
    def load(self) -> BackupConfig:
        """Load config.

        Returns:
            BackupConfig instance with loaded values

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...


def parse_config(data: dict[str, object], config_path: Path) -> BackupConfig:
    """Build a BackupConfig from parsed TOML data.

    Args:
        data: Parsed TOML document
        config_path: Source of the data, used in error messages

    Raises:
        ValueError: If a value has the wrong type or is out of range
    """
    log_level = data.get("log_level", "info")
    if not isinstance(log_level, str) or log_level.lower() not in LOG_LEVELS:
        raise ValueError(
            f"Invalid 'log_level' in {config_path}: {log_level!r}\n"
            f"Expected one of: {', '.join(LOG_LEVELS)}"
        )

    utilities = data.get("utilities", {})
    if not isinstance(utilities, dict):
        raise ValueError(f"'utilities' in {config_path} must be a table")

    utility_paths: dict[str, str] = {}
    for raw_name, raw_path in utilities.items():
        name = raw_name.strip()
        if not name:
            raise ValueError(f"Empty utility name in {config_path}")
        if not isinstance(raw_path, str) or not Path(raw_path).is_absolute():
            raise ValueError(
                f"Path for utility '{name}' in {config_path} must be an absolute path, "
                f"got {raw_path!r}"
            )
        utility_paths[name] = raw_path

    return BackupConfig(log_level=log_level.lower(), utility_paths=utility_paths)


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads ~/.backup/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> BackupConfig:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Could not read {config_path}: {e}") from e

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed TOML in {config_path}: {e}") from e

        return parse_config(data, config_path)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".backup" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: BackupConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> BackupConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def path(self) -> Path:
        return Path("/fake/backup/config.toml")
