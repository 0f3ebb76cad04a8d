"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def awesome_markdown() -> str:
    """Sample curated markdown list."""
    return """# Awesome Tools

A curated list.

## Contents

- [Tools](#tools)
- [Resources](#resources)

## Tools

### Command Line

- [httpie](https://github.com/httpie/cli) - Modern HTTP client.
- [ripgrep](https://github.com/BurntSushi/ripgrep.git) – Fast grep.

### GUI

- [Insomnia](https://insomnia.rest) - API client.

## Resources

- [Python](https://www.python.org/)
- [Local notes](./notes.md)
"""


@pytest.fixture
def list_dir(tmp_path: Path, awesome_markdown: str) -> Path:
    """Directory holding a listhub.toml, a markdown list and a nested list file."""
    (tmp_path / "README.md").write_text(awesome_markdown, encoding="utf-8")
    (tmp_path / "more.toml").write_text(
        """[[sources]]
type = "inline"
data = ["https://docs.python.org"]
options = { category = "Resources/Docs" }
""",
        encoding="utf-8",
    )
    (tmp_path / "listhub.toml").write_text(
        """id = "awesome"
name = "Awesome Tools"

[[sources]]
type = "markdown"
data = "README.md"

[[sources]]
type = "list"
data = "more.toml"

[options.categoryOrder]
resources = 1
""",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def cache_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CACHE_HOME at a temporary directory."""
    cache = tmp_path / "xdg-cache"
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache))
    return cache
