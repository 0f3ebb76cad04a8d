"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from listhub.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


@pytest.fixture
def no_user_theme(tmp_path: Path):
    """Hide any real user theme."""
    with patch(
        "listhub.core.theme.get_user_theme_path",
        return_value=tmp_path / "missing" / "theme.toml",
    ):
        yield


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.category == "#69B9A1"
        assert colors.count == "#0e8ac8"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts valid hex color codes."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(category="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\ncount = 3\n')

        result = _load_toml_colors(theme_file)

        # Non-string values are dropped
        assert result == {"text": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_invalid_colors_section(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The bundled theme ships with the package."""
        assert Path(str(get_bundled_theme_path())).is_file()

    @pytest.mark.usefixtures("no_user_theme")
    def test_loads_bundled_theme(self) -> None:
        """Loads theme from bundled data file."""
        colors = load_theme()

        assert colors == ThemeColors()

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ncategory = "#ff0000"\n')

        with patch("listhub.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.category == "#ff0000"
        assert colors.text == "#ffffff"

    def test_invalid_user_color_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the default theme."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ncategory = "red"\n')

        with patch("listhub.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_includes_styles(self) -> None:
        """Theme includes base, category and convenience styles."""
        theme = get_rich_theme(ThemeColors())

        for name in ("text", "muted", "error", "category", "category_nested", "count"):
            assert name in theme.styles
        assert "bold_header" in theme.styles
        assert theme.styles["category"].bold


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        get_theme.cache_clear()

        theme1 = get_theme()
        theme2 = get_theme()

        assert isinstance(theme1, Theme)
        assert theme1 is theme2
