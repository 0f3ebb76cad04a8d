"""Unit tests for list definition file I/O.

Tests for loading TOML and JSON definitions and saving them as TOML.
"""

import json
import tomllib
from pathlib import Path

import pytest
from listhub.core.definition import (
    DefinitionNotFoundError,
    DefinitionParseError,
    InvalidDefinitionError,
    load_definition,
    read_definition_data,
    save_definition,
)
from listhub.models.definition import ListDefinition, ListOptions, SourceDefinition


@pytest.fixture
def toml_definition(tmp_path: Path) -> Path:
    """Minimal valid TOML definition file."""
    path = tmp_path / "listhub.toml"
    path.write_text(
        """id = "python"
name = "Python"

[[sources]]
type = "markdown"
data = "README.md"
options = { exclude = ["^https://example.com"] }

[options.source]
categories = { Testing = "test" }

[options.categoryOrder]
testing = 1
"""
    )
    return path


class TestReadDefinitionData:
    """Tests for read_definition_data function."""

    def test_reads_toml(self, toml_definition: Path) -> None:
        """Reads raw TOML data without validation."""
        data = read_definition_data(toml_definition)

        assert data["id"] == "python"
        assert data["sources"][0]["type"] == "markdown"

    def test_reads_json(self, tmp_path: Path) -> None:
        """Reads raw JSON data."""
        path = tmp_path / "list.json"
        path.write_text(json.dumps({"id": "x", "sources": [{"type": "inline", "data": []}]}))

        assert read_definition_data(path)["id"] == "x"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing files raise DefinitionNotFoundError."""
        with pytest.raises(DefinitionNotFoundError, match="not found"):
            read_definition_data(tmp_path / "missing.toml")

    def test_unsupported_suffix_raises(self, tmp_path: Path) -> None:
        """Files other than TOML and JSON are rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("id: x\n")

        with pytest.raises(DefinitionParseError, match="Unsupported definition format"):
            read_definition_data(path)

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Malformed TOML raises DefinitionParseError."""
        path = tmp_path / "list.toml"
        path.write_text("id = [unclosed")

        with pytest.raises(DefinitionParseError, match="Invalid TOML syntax"):
            read_definition_data(path)

    def test_non_mapping_json_raises(self, tmp_path: Path) -> None:
        """JSON documents must be objects."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(DefinitionParseError, match="must be a mapping"):
            read_definition_data(path)


class TestLoadDefinition:
    """Tests for load_definition function."""

    def test_loads_valid_definition(self, toml_definition: Path) -> None:
        """A valid file yields a ListDefinition."""
        definition = load_definition(toml_definition)

        assert definition.id == "python"
        assert definition.sources[0].options == {"exclude": ["^https://example.com"]}
        assert definition.options.source == {"categories": {"Testing": "test"}}
        assert definition.options.category_order == {"testing": 1}

    def test_schema_violation_raises(self, tmp_path: Path) -> None:
        """Content not matching the schema raises InvalidDefinitionError."""
        path = tmp_path / "list.toml"
        path.write_text('id = "x"\nsources = []\n')

        with pytest.raises(InvalidDefinitionError, match="Invalid list definition"):
            load_definition(path)


class TestSaveDefinition:
    """Tests for save_definition function."""

    def test_round_trips_through_toml(self, tmp_path: Path) -> None:
        """Saved definitions load back unchanged, with aliased keys."""
        definition = ListDefinition(
            id="demo",
            sources=[SourceDefinition(type="inline", data=["https://example.org"])],
            options=ListOptions(category_order={"docs": 2}),
        )
        path = tmp_path / "nested" / "listhub.toml"

        saved = save_definition(definition, path)

        assert saved == path
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        assert raw["options"]["categoryOrder"] == {"docs": 2}
        assert "name" not in raw
        assert load_definition(path) == definition

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """The atomic write cleans up its temporary file."""
        definition = ListDefinition(id="demo", sources=[SourceDefinition(type="inline", data=[])])

        save_definition(definition, tmp_path / "listhub.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["listhub.toml"]
