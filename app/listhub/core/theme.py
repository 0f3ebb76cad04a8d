"""Color theme for listhub console output.

The bundled data/theme.toml holds the defaults. Any subset of its
[colors] table can be overridden in ~/.config/listhub/theme.toml.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from listhub.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

# Rich style name -> (color field, style template)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", "{}"),
    "muted": ("muted", "{}"),
    "dim": ("muted", "{}"),
    "header": ("header", "{}"),
    "bold_header": ("header", "bold {}"),
    "border": ("border", "{}"),
    "success": ("success", "{}"),
    "warning": ("warning", "{}"),
    "error": ("error", "bold {}"),
    "info": ("info", "{}"),
    "category": ("category", "bold {}"),
    "category_nested": ("category_nested", "{}"),
    "count": ("count", "{}"),
}


class ThemeColors(BaseModel):
    """Hex colors used by the CLI (#RGB or #RRGGBB)."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    category: str = "#69B9A1"
    category_nested: str = "#226666"
    count: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object, info: Any) -> str:
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name}: color must be a string")
        color = v.strip()
        if not color.startswith("#"):
            raise ValueError(f"{info.field_name}: color must start with '#'")
        if len(color) not in (4, 7):
            raise ValueError(f"{info.field_name}: color must be #RGB or #RRGGBB format")
        if not _HEX_DIGITS.match(color[1:]):
            raise ValueError(f"{info.field_name}: invalid hex color '{color}'")
        return color


def get_bundled_theme_path() -> Path:
    """Path of the theme file shipped in listhub.data."""
    return Path(str(resources.files("listhub.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the [colors] table of a theme file.

    Non-string values are dropped.

    Returns:
        Color name to value mapping, or None if the file is missing or
        unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Load the bundled colors with the user overrides applied.

    An invalid user theme falls back to the defaults with a warning.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing; the installation may be broken")
        colors = {}

    user_path = get_user_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors = {**colors, **overrides}

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for a set of colors (loaded when omitted)."""
    if colors is None:
        colors = load_theme()
    styles = {
        name: template.format(getattr(colors, field)) for name, (field, template) in _STYLES.items()
    }
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme shared by all consoles, loaded once."""
    return get_rich_theme()
