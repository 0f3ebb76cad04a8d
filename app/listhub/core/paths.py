"""Filesystem locations used by listhub.

User configuration and caches follow the XDG base directory layout:

- config: $XDG_CONFIG_HOME/listhub, default ~/.config/listhub
- cache:  $XDG_CACHE_HOME/listhub, default ~/.cache/listhub

List definitions are looked up in the working directory.
"""

import os
from pathlib import Path

APP_NAME = "listhub"

DEFAULT_LIST_FILENAME = "listhub.toml"


def _xdg_app_dir(env_var: str, fallback: str) -> Path:
    """Return the listhub directory under an XDG base directory.

    Args:
        env_var: Environment variable naming the base directory.
        fallback: Base directory relative to home when the variable is unset.
    """
    base = os.environ.get(env_var)
    root = Path(base) if base else Path.home() / fallback
    return root / APP_NAME


def get_config_dir() -> Path:
    return _xdg_app_dir("XDG_CONFIG_HOME", ".config")


def get_cache_dir() -> Path:
    """Directory holding resolver caches; safe to delete."""
    return _xdg_app_dir("XDG_CACHE_HOME", ".cache")


def get_user_theme_path() -> Path:
    return get_config_dir() / "theme.toml"


def get_default_list_path() -> Path:
    """Path of ./listhub.toml in the working directory."""
    return Path.cwd() / DEFAULT_LIST_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create a directory and its parents if missing.

    Args:
        path: Directory to create.
        name: What the directory is for, used in the error message.

    Returns:
        The directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        reason = "Permission denied" if isinstance(e, PermissionError) else str(e)
        raise RuntimeError(f"Cannot create {name} directory {path}: {reason}") from e
    return path
