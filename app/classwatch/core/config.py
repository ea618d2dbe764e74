"""Watch configuration and settings.

This module provides the configuration model and I/O functions for the
change detector: which directories to watch, which files count and how
often the CLI polls.

Configuration is stored in ~/.config/classwatch/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from classwatch.core.paths import get_config_path
from classwatch.roots.provider import ClasspathRootProvider

DEFAULT_INTERVAL_SECONDS = 2.0


class WatchConfig(BaseModel):
    """Configuration for the classwatch CLI.

    Attributes:
        roots: Class output directories to watch.
        classpath: Optional classpath string; its directory entries are
            watched before ``roots``.
        suffixes: File suffixes to track (e.g. ``[".class"]``). Empty means
            every file is tracked.
        interval_seconds: Delay between polls in ``classwatch watch``.
    """

    model_config = ConfigDict(extra="forbid")

    roots: Annotated[
        list[Path],
        Field(description="Root directories to scan"),
    ] = []
    classpath: Annotated[
        str | None,
        Field(description="Classpath whose directory entries are scanned"),
    ] = None
    suffixes: Annotated[
        list[str],
        Field(description="Tracked file suffixes (empty = all files)"),
    ] = []
    interval_seconds: Annotated[
        float,
        Field(gt=0, le=3600, description="Polling interval in seconds (0-3600]"),
    ] = DEFAULT_INTERVAL_SECONDS

    @field_validator("suffixes")
    @classmethod
    def validate_suffixes(cls, v: list[str]) -> list[str]:
        """Require every suffix to start with a dot."""
        for suffix in v:
            if not suffix.startswith(".") or len(suffix) < 2:
                msg = f"Suffix must start with '.' and name an extension, got {suffix!r}"
                raise ValueError(msg)
        return v

    @property
    def suffix_filter(self) -> tuple[str, ...] | None:
        """Suffixes in the form the detector expects (None = no filter)."""
        return tuple(self.suffixes) if self.suffixes else None

    def root_provider(self) -> ClasspathRootProvider:
        """Build the root provider described by this configuration."""
        return ClasspathRootProvider(self.classpath or "", self.roots)


class WatchConfigError(Exception):
    """Base exception for watch configuration errors."""


class WatchConfigNotFoundError(WatchConfigError):
    """Raised when the config file is not found."""


class WatchConfigParseError(WatchConfigError):
    """Raised when the config file cannot be parsed."""


def load_watch_config(path: Path | None = None) -> WatchConfig:
    """Load watch configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated WatchConfig object.

    Raises:
        WatchConfigNotFoundError: If the config file doesn't exist.
        WatchConfigParseError: If the TOML syntax is invalid.
        WatchConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise WatchConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise WatchConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise WatchConfigError(f"Failed to read config: {e}") from e

    try:
        return WatchConfig.model_validate(data)
    except ValidationError as e:
        raise WatchConfigError(f"Invalid config content: {e}") from e


def load_watch_config_or_default(path: Path | None = None) -> WatchConfig:
    """Load the config file, falling back to defaults when it doesn't exist.

    Raises:
        WatchConfigError: If the file exists but is unreadable or invalid.
    """
    try:
        return load_watch_config(path)
    except WatchConfigNotFoundError:
        return WatchConfig()


def save_watch_config(config: WatchConfig, path: Path | None = None) -> Path:
    """Save watch configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The WatchConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        WatchConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise WatchConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: WatchConfig) -> dict[str, object]:
    """Convert WatchConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset classpath is omitted.
    """
    result: dict[str, object] = {
        "roots": [str(root) for root in config.roots],
        "suffixes": list(config.suffixes),
        "interval_seconds": config.interval_seconds,
    }

    if config.classpath is not None:
        result["classpath"] = config.classpath

    return result
