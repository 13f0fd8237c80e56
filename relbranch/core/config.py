"""Typed configuration loading.

Configuration lives in `.relbranch.toml` at the repository root (or any file
passed with --config). Every key is optional; a missing file means defaults.

    [release]
    remote = "origin"
    push = true
    tag_order = "version"
    default_branch = "main"

    [git]
    timeout_seconds = 120
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_number, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_REMOTE",
    "Config",
    "ConfigError",
    "GitConfig",
    "ReleaseConfig",
    "TagOrderName",
    "load_config",
    "load_repo_config",
]

CONFIG_FILENAME = ".relbranch.toml"

DEFAULT_REMOTE = "origin"

TagOrderName = Literal["version", "listed"]
_TAG_ORDERS: tuple[TagOrderName, ...] = ("version", "listed")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release branch policy settings."""

    remote: str = DEFAULT_REMOTE
    push: bool = True
    tag_order: TagOrderName = "version"
    default_branch: str | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """Git invocation settings.

    timeout_seconds is None by default: git calls block until they finish.
    """

    timeout_seconds: float | None = None


@dataclass(frozen=True, slots=True)
class Config:
    release: ReleaseConfig = field(default_factory=ReleaseConfig)
    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML. Invalid values fall back to defaults."""
        release: StrDict = get_table(data, "release") or {}
        git: StrDict = get_table(data, "git") or {}

        tag_order = get_str(release, "tag_order")
        push = get_bool(release, "push")
        timeout = get_number(git, "timeout_seconds")

        return cls(
            release=ReleaseConfig(
                remote=get_str(release, "remote") or DEFAULT_REMOTE,
                push=True if push is None else push,
                tag_order=_tag_order_or_default(tag_order),
                default_branch=get_str(release, "default_branch"),
            ),
            git=GitConfig(
                timeout_seconds=timeout if timeout is not None and timeout > 0 else None,
            ),
        )


def _tag_order_or_default(value: str | None) -> TagOrderName:
    for name in _TAG_ORDERS:
        if value == name:
            return name
    return "version"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_repo_config(repo_path: Path, explicit: Path | None = None) -> Result[Config, ConfigError]:
    """Load the explicit config file, else the repository's own, else defaults.

    An explicit path must exist; the repository file is optional.
    """
    if explicit is not None:
        return load_config(explicit)

    candidate = repo_path / CONFIG_FILENAME
    if not candidate.is_file():
        return Ok(Config())
    return load_config(candidate)
