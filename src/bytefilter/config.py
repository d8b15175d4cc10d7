"""Run configuration for the filter pipeline."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

# Bytes requested per read call
BUFFER_SIZE = 1024

# Largest accepted chunk_size (64 MiB)
MAX_CHUNK_SIZE = 64 * 1024 * 1024

# Permissions for newly created output files (owner rw, group/other r)
FILE_PERMISSIONS = 0o644

_SETTINGS_KEYS = {"chunk_size", "file_mode", "log_level"}


@dataclass
class Settings:
    """Tunable settings, optionally loaded from a YAML file."""

    chunk_size: int = BUFFER_SIZE
    file_mode: int = FILE_PERMISSIONS
    log_level: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create Settings from the ``settings`` mapping of a YAML file."""
        unknown = set(data) - _SETTINGS_KEYS
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")

        settings = cls()
        if "chunk_size" in data:
            settings.chunk_size = _parse_chunk_size(data["chunk_size"])
        if "file_mode" in data:
            settings.file_mode = _parse_file_mode(data["file_mode"])
        if "log_level" in data:
            settings.log_level = _parse_log_level(data["log_level"])
        return settings

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        The file may be empty; otherwise its top level must be a mapping with
        an optional ``settings`` key.
        """
        try:
            # Binary mode lets PyYAML report undecodable input as a YAMLError
            with open(path, "rb") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        settings = data.get("settings") or {}
        if not isinstance(settings, dict):
            raise ConfigError("'settings' must be a mapping")
        return cls.from_dict(settings)


def _parse_chunk_size(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"chunk_size must be a positive integer, got {value!r}")
    if value > MAX_CHUNK_SIZE:
        raise ConfigError(f"chunk_size must be at most {MAX_CHUNK_SIZE}, got {value!r}")
    return value


def _parse_file_mode(value: Any) -> int:
    # PyYAML already reads an unquoted 0644 as an octal integer
    if isinstance(value, int) and not isinstance(value, bool):
        mode = value
    elif isinstance(value, str):
        try:
            mode = int(value, 8)
        except ValueError as e:
            raise ConfigError(f"file_mode must be an octal string, got {value!r}") from e
    else:
        raise ConfigError(f"file_mode must be an octal string, got {value!r}")
    if not 0 <= mode <= 0o7777:
        raise ConfigError(f"file_mode out of range: {value!r}")
    return mode


def _parse_log_level(value: Any) -> int:
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log_level: {value!r}")
    return level


@dataclass
class FilterConfig:
    """Configuration for a single filter run.

    Paths are kept as the strings given on the command line; identical-path
    detection compares them textually, without resolving symlinks or
    relative segments.
    """

    input_path: str
    output_path: str
    filter_name: str
    settings: Settings = field(default_factory=Settings)

    @property
    def same_path(self) -> bool:
        """True when input and output name the same path string."""
        return self.input_path == self.output_path

    @property
    def chunk_size(self) -> int:
        return self.settings.chunk_size

    @property
    def file_mode(self) -> int:
        return self.settings.file_mode
