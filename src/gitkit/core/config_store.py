"""Configuration data structures and loading.

Provides immutable configuration loaded from ~/.gitkit/config.toml once at the
CLI entry point. Every field is optional in the file:

    shell = "/bin/sh"
    verbose = false
    path = "/path/to/repo"
    max_workers = 4

    [env]
    GIT_AUTHOR_NAME = "Jane Doe"
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomlkit


@dataclass(frozen=True)
class GitkitConfig:
    """Immutable configuration data.

    All fields are read-only after construction.
    """

    shell: str = "/bin/sh"
    env: dict[str, str] = field(default_factory=dict)
    verbose: bool = False
    path: str | None = None
    max_workers: int | None = None


class ConfigStore(ABC):
    """Abstract interface for config operations.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if config exists."""
        ...

    @abstractmethod
    def load(self) -> GitkitConfig:
        """Load config.

        Returns:
            GitkitConfig instance with loaded values

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config has fields of the wrong type
        """
        ...

    @abstractmethod
    def save(self, config: GitkitConfig) -> None:
        """Save config.

        Args:
            config: GitkitConfig instance to save
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...

    def load_or_default(self) -> GitkitConfig:
        """Load config, falling back to defaults when none exists."""
        if not self.exists():
            return GitkitConfig()
        return self.load()


def parse_config(data: dict[str, Any], source: Path) -> GitkitConfig:
    """Build a GitkitConfig from parsed TOML data.

    Args:
        data: Parsed TOML document
        source: Path the data was read from, used in error messages

    Raises:
        ValueError: If a field has the wrong type
    """
    shell = data.get("shell", "/bin/sh")
    if not isinstance(shell, str) or not shell:
        raise ValueError(f"'shell' must be a non-empty string in {source}")

    env = data.get("env", {})
    if not isinstance(env, dict) or not all(isinstance(v, str) for v in env.values()):
        raise ValueError(f"'env' must be a table of strings in {source}")

    verbose = data.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ValueError(f"'verbose' must be true or false in {source}")

    path = data.get("path")
    if path is not None and not isinstance(path, str):
        raise ValueError(f"'path' must be a string in {source}")

    max_workers = data.get("max_workers")
    if max_workers is not None and (
        isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1
    ):
        raise ValueError(f"'max_workers' must be a positive integer in {source}")

    return GitkitConfig(
        shell=shell,
        env=dict(env),
        verbose=verbose,
        path=path,
        max_workers=max_workers,
    )


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.gitkit/config.toml."""

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.path().exists()

    def load(self) -> GitkitConfig:
        """Load config from ~/.gitkit/config.toml."""
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        return parse_config(data, config_path)

    def save(self, config: GitkitConfig) -> None:
        """Save config to ~/.gitkit/config.toml.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )
        parent.mkdir(parents=True, exist_ok=True)

        doc = tomlkit.document()
        doc.add(tomlkit.comment("gitkit configuration"))
        doc["shell"] = config.shell
        doc["verbose"] = config.verbose
        if config.path is not None:
            doc["path"] = config.path
        if config.max_workers is not None:
            doc["max_workers"] = config.max_workers
        env = tomlkit.table()
        for key, value in sorted(config.env.items()):
            env[key] = value
        doc["env"] = env

        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Path to ~/.gitkit/config.toml
        """
        return Path.home() / ".gitkit" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GitkitConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GitkitConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: GitkitConfig) -> None:
        self._config = config

    def path(self) -> Path:
        """Get fake path for error messages."""
        return Path("/fake/gitkit/config.toml")
