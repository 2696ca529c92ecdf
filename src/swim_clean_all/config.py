"""Optional TOML config file holding extra directories to skip."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import click

from swim_clean_all.errors import ConfigError
from swim_clean_all.utils import xdg_config_home

log = logging.getLogger(__name__)

APP_NAME = "swim-clean-all"
DEFAULT_CONFIG_FILE_NAME = f"{APP_NAME}.toml"


@dataclass(frozen=True, slots=True)
class FileConfig:
    """Parsed contents of the config file."""

    skip: list[str] = field(default_factory=list)


def platform_config_dir() -> Path | None:
    """Return the operating system's local config directory, if known.

    click resolves the per-application directory; its parent is the
    shared config directory (``~/.config``, ``~/Library/Application
    Support``, ``%LOCALAPPDATA%``).
    """
    app_dir = click.get_app_dir(APP_NAME, roaming=False)
    return Path(app_dir).parent if app_dir else None


def find_config_dir(
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    platform_dir: Callable[[], Path | None] = platform_config_dir,
) -> Path:
    """Pick the directory the config file should live in.

    Order: ``XDG_CONFIG_HOME``, then the platform default, then
    ``~/.config``.
    """
    env = os.environ if env is None else env
    xdg = xdg_config_home(env)
    if xdg is not None:
        return xdg
    platform = platform_dir()
    if platform is not None:
        return platform
    home = Path.home() if home is None else home
    return home / ".config"


def find_config_file(
    explicit: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    platform_dir: Callable[[], Path | None] = platform_config_dir,
) -> Path | None:
    """Return the config file path to try, or None if there is nowhere to look."""
    if explicit is not None:
        return Path(explicit)

    config_dir = find_config_dir(env, home, platform_dir)
    if not config_dir.is_dir():
        log.warning("No config directory found on system")
        return None
    return config_dir / DEFAULT_CONFIG_FILE_NAME


def load_config(path: Path) -> FileConfig | None:
    """Load and validate the config file at *path*.

    Returns None (with a warning) when the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if not path.is_file():
        log.warning("Config file %s does not exist or is not a file", path)
        return None

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to load config file {path}: {e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}", path) from e

    skip = data.get("skip", [])
    if not isinstance(skip, list) or not all(isinstance(item, str) for item in skip):
        raise ConfigError(f"Failed to parse config file {path}: 'skip' must be a list of paths", path)

    log.debug("Loaded config from %s", path)
    return FileConfig(skip=list(skip))


def read_config(
    explicit: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
    platform_dir: Callable[[], Path | None] = platform_config_dir,
) -> FileConfig | None:
    """Find and load the config file, or return None if there is none."""
    path = find_config_file(explicit, env, home, platform_dir)
    if path is None:
        return None
    return load_config(path)
