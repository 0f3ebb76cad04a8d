"""Regex handling for source exclude and category options."""

import re
from dataclasses import dataclass, field

from listhub.core.errors import InvalidPatternError
from listhub.models.source import Source

# '/expr/flags' style patterns with trailing regex flags
_DELIMITED = re.compile(r"^/(?P<expr>.*)/(?P<flags>[imsx]*)$", re.DOTALL)

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


def compile_pattern(pattern: str, option: str = "pattern") -> re.Pattern[str]:
    """Compile an exclude or category pattern.

    '*' matches everything. Patterns wrapped in slashes may carry
    trailing flags (e.g. '/^foo/i'); bare patterns are used as-is.

    Args:
        pattern: Pattern as written in the list definition.
        option: Option name used in the error message.

    Returns:
        Compiled regular expression, matched with search().

    Raises:
        InvalidPatternError: If the pattern does not compile.
    """
    expr = ".*" if pattern == "*" else pattern
    flags = 0

    match = _DELIMITED.match(expr)
    if match is not None:
        expr = match.group("expr")
        for flag in match.group("flags"):
            flags |= _FLAGS[flag]

    try:
        return re.compile(expr, flags)
    except re.error as e:
        msg = f"Invalid {option} regex '{pattern}': {e}"
        raise InvalidPatternError(msg) from e


@dataclass(frozen=True, slots=True)
class SourcePatterns:
    """Compiled exclude and category patterns of a single source.

    Attributes:
        exclude: Patterns rejecting entry ids.
        categories: (label, patterns) pairs assigning labels to entry ids.
    """

    exclude: tuple[re.Pattern[str], ...] = field(default=())
    categories: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = field(default=())

    @classmethod
    def compile(cls, source: Source) -> "SourcePatterns":
        """Compile all patterns of a source once.

        Raises:
            InvalidPatternError: If any pattern is invalid.
        """
        exclude = tuple(
            compile_pattern(p, "exclude") for p in source.get_option("exclude", [])
        )

        categories: list[tuple[str, tuple[re.Pattern[str], ...]]] = []
        for label, patterns in source.get_option("categories", {}).items():
            if not isinstance(patterns, list):
                patterns = [patterns]
            categories.append((label, tuple(compile_pattern(p, "category") for p in patterns)))

        return cls(exclude=exclude, categories=tuple(categories))

    def is_excluded(self, entry_id: str) -> bool:
        return any(p.search(entry_id) for p in self.exclude)

    def match_categories(self, entry_id: str) -> list[str]:
        """Return the labels to append for an entry id.

        A label is appended once per matching pattern.
        """
        labels: list[str] = []
        for label, patterns in self.categories:
            for pattern in patterns:
                if pattern.search(entry_id):
                    labels.append(label)
        return labels
