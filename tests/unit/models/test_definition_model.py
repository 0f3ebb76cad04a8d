"""Unit tests for the list definition models."""

import pytest
from listhub.models.definition import ListDefinition, ListOptions, SourceDefinition
from pydantic import ValidationError


class TestSourceDefinition:
    """Tests for SourceDefinition model."""

    def test_minimal(self) -> None:
        """Only the type is required."""
        source = SourceDefinition(type="inline")

        assert source.data is None
        assert source.options == {}

    def test_empty_type_rejected(self) -> None:
        """The type cannot be empty."""
        with pytest.raises(ValidationError):
            SourceDefinition(type="")

    def test_unknown_field_rejected(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            SourceDefinition(type="inline", path="x")  # type: ignore[call-arg]

    def test_unknown_options_kept(self) -> None:
        """Processor specific options pass through untouched."""
        source = SourceDefinition(type="markdown", options={"minHeadingLevel": 3})

        assert source.options == {"minHeadingLevel": 3}

    @pytest.mark.parametrize(
        "options",
        [
            {"exclude": "^a"},
            {"exclude": [""]},
            {"category": ""},
            {"category": ["A"]},
            {"categories": ["A"]},
            {"categories": {"A": [1]}},
        ],
    )
    def test_invalid_known_options_rejected(self, options: dict) -> None:
        """exclude, category and categories are shape-checked."""
        with pytest.raises(ValidationError):
            SourceDefinition(type="inline", options=options)


class TestListOptions:
    """Tests for ListOptions model."""

    def test_category_order_alias(self) -> None:
        """categoryOrder is accepted by alias and by name."""
        assert ListOptions.model_validate({"categoryOrder": {"a": 1}}).category_order == {"a": 1}
        assert ListOptions(category_order={"a": 1}).category_order == {"a": 1}

    def test_source_defaults_validated(self) -> None:
        """Default source options obey the same rules as source options."""
        with pytest.raises(ValidationError):
            ListOptions(source={"exclude": "x"})


class TestListDefinition:
    """Tests for ListDefinition model."""

    def test_valid(self) -> None:
        """A definition needs an id and at least one source."""
        definition = ListDefinition.model_validate(
            {"id": "demo", "sources": [{"type": "inline", "data": []}]}
        )

        assert definition.name is None
        assert definition.options == ListOptions()

    @pytest.mark.parametrize(
        "data",
        [
            {"sources": [{"type": "inline"}]},
            {"id": "", "sources": [{"type": "inline"}]},
            {"id": "demo", "sources": []},
            {"id": "demo", "sources": [{"type": "inline"}], "extra": 1},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        """Missing ids, empty sources and unknown keys are rejected."""
        with pytest.raises(ValidationError):
            ListDefinition.model_validate(data)
