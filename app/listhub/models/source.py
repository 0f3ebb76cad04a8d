"""Source descriptor model.

A source tells the processor chain where to obtain entries from. Its
options carry the per-source exclusion and categorization rules.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def merge_options(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge source options over default options.

    Mappings merge recursively, lists are concatenated (defaults first)
    and any other value from overrides replaces the default.

    Args:
        defaults: List-level default options.
        overrides: Source-level options.

    Returns:
        New merged options dictionary.
    """
    merged: dict[str, Any] = dict(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = [*current, *value]
        else:
            merged[key] = value
    return merged


@dataclass(slots=True)
class Source:
    """A typed, option-bearing descriptor of where to obtain entries.

    Attributes:
        type: Discriminator used by processors to claim the source.
        data: Opaque payload interpreted by the claiming processor.
        options: Source options (exclude, category, categories, ...).
    """

    type: str
    data: Any = None
    options: dict[str, Any] = field(default_factory=dict)

    def has_option(self, key: str) -> bool:
        """Check if an option is set."""
        return key in self.options and self.options[key] is not None

    def get_option(self, key: str, default: Any = None) -> Any:
        """Get an option value or the default when unset."""
        value = self.options.get(key)
        return default if value is None else value

    def with_defaults(self, defaults: Mapping[str, Any]) -> "Source":
        """Return a copy whose options are merged over defaults."""
        return Source(type=self.type, data=self.data, options=merge_options(defaults, self.options))

    def describe(self) -> str:
        """Short human-readable description for log messages."""
        if isinstance(self.data, str):
            return f"type={self.type} data={self.data}"
        return f"type={self.type}"
