"""List definition file I/O.

This module provides functions for loading list definitions from TOML
or JSON files and for writing starter definitions, validating them with
the Pydantic models.
"""

import json
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from listhub.core.errors import ListhubError
from listhub.models.definition import ListDefinition

SUPPORTED_SUFFIXES = (".toml", ".json")


class DefinitionError(ListhubError):
    """Base exception for list definition errors."""


class DefinitionNotFoundError(DefinitionError):
    """Raised when a definition file is not found."""


class DefinitionParseError(DefinitionError):
    """Raised when a definition file cannot be parsed."""


class InvalidDefinitionError(DefinitionError):
    """Raised when definition content does not match the schema."""


def read_definition_data(path: Path) -> dict[str, Any]:
    """Read raw definition data from a TOML or JSON file.

    Args:
        path: Path to the definition file.

    Returns:
        Parsed, unvalidated data.

    Raises:
        DefinitionNotFoundError: If the file doesn't exist.
        DefinitionParseError: If the file cannot be parsed.
    """
    if not path.is_file():
        raise DefinitionNotFoundError(f"List definition not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DefinitionParseError(
            f"Unsupported definition format '{suffix}' (expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )

    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise DefinitionParseError(f"Invalid {suffix[1:].upper()} syntax in {path}: {e}") from e
    except OSError as e:
        raise DefinitionError(f"Failed to read list definition: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionParseError(f"List definition must be a mapping: {path}")
    return data


def load_definition(path: Path) -> ListDefinition:
    """Load and validate a list definition.

    Args:
        path: Path to a .toml or .json definition file.

    Returns:
        Validated ListDefinition.

    Raises:
        DefinitionNotFoundError: If the file doesn't exist.
        DefinitionParseError: If the file cannot be parsed.
        InvalidDefinitionError: If the content doesn't match the schema.
    """
    data = read_definition_data(path)
    try:
        return ListDefinition.model_validate(data)
    except ValidationError as e:
        raise InvalidDefinitionError(f"Invalid list definition: {e}") from e


def save_definition(definition: ListDefinition, path: Path) -> Path:
    """Save a list definition as TOML.

    The file is written atomically through a temporary file in the same
    directory.

    Args:
        definition: Definition to save.
        path: Destination path.

    Returns:
        Path where the definition was saved.

    Raises:
        DefinitionError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = definition.model_dump(by_alias=True, exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(mode="wb", dir=path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise DefinitionError(f"Failed to write list definition: {e}") from e

    return path
