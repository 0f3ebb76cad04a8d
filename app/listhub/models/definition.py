"""List definition models.

This module defines the Pydantic models describing a list definition
file: the list identity, its ordered sources and the global options.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_source_options(options: dict[str, Any]) -> dict[str, Any]:
    """Validate the source options understood by the engine.

    Unknown keys are left alone for processors to interpret.

    Raises:
        ValueError: If a known option has the wrong shape.
    """
    exclude = options.get("exclude")
    if exclude is not None:
        if not isinstance(exclude, list) or not all(isinstance(p, str) and p for p in exclude):
            msg = "'exclude' must be a list of non-empty pattern strings"
            raise ValueError(msg)

    category = options.get("category")
    if category is not None and (not isinstance(category, str) or not category.strip()):
        msg = "'category' must be a non-empty string"
        raise ValueError(msg)

    categories = options.get("categories")
    if categories is not None:
        if not isinstance(categories, dict):
            msg = "'categories' must be a mapping of category path to pattern(s)"
            raise ValueError(msg)
        for label, patterns in categories.items():
            values = patterns if isinstance(patterns, list) else [patterns]
            if not all(isinstance(p, str) and p for p in values):
                msg = f"'categories.{label}' must be a pattern string or a list of them"
                raise ValueError(msg)

    return options


class SourceDefinition(BaseModel):
    """A single source in the list definition.

    Attributes:
        type: Source type claimed by a processor (e.g. "markdown").
        data: Payload interpreted by the processor (path, entries, ...).
        options: Source options merged over the list-level defaults.
    """

    model_config = ConfigDict(extra="forbid")

    type: Annotated[str, Field(min_length=1, description="Source type")]
    data: Annotated[Any, Field(description="Processor specific payload")] = None
    options: Annotated[
        dict[str, Any],
        Field(default_factory=dict, description="Source options"),
    ]

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: dict[str, Any]) -> dict[str, Any]:
        return _check_source_options(v)


class ListOptions(BaseModel):
    """Global options of a list definition.

    Attributes:
        source: Default options applied to every source.
        category_order: Display priority per category path.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: Annotated[
        dict[str, Any],
        Field(default_factory=dict, description="Default source options"),
    ]
    category_order: Annotated[
        dict[str, int],
        Field(default_factory=dict, alias="categoryOrder", description="Category priorities"),
    ]

    @field_validator("source")
    @classmethod
    def validate_source_defaults(cls, v: dict[str, Any]) -> dict[str, Any]:
        return _check_source_options(v)


class ListDefinition(BaseModel):
    """Complete list definition.

    Attributes:
        id: List identifier.
        name: Optional display name.
        description: Optional description.
        url: Optional homepage of the list.
        sources: Ordered list of sources.
        options: Global options.
    """

    model_config = ConfigDict(extra="forbid")

    id: Annotated[str, Field(min_length=1, description="List identifier")]
    name: Annotated[str | None, Field(description="Display name")] = None
    description: Annotated[str | None, Field(description="List description")] = None
    url: Annotated[str | None, Field(description="List homepage")] = None
    sources: Annotated[
        list[SourceDefinition],
        Field(min_length=1, description="Ordered list sources"),
    ]
    options: Annotated[
        ListOptions,
        Field(default_factory=ListOptions, description="Global list options"),
    ]
