"""Exception hierarchy for the list processing engine.

Configuration errors abort the current call. Resolve failures are
per-entry and only remove the affected entry from the list.
"""


class ListhubError(Exception):
    """Base exception for all listhub errors."""


class ListConfigurationError(ListhubError):
    """Raised when the engine is misconfigured or misused.

    Examples are an empty processor chain, resolving an unprocessed
    list, or an invalid source option.
    """


class InvalidPatternError(ListConfigurationError):
    """Raised when an exclude or category pattern is not a valid regex."""


class ProcessorContractError(ListConfigurationError):
    """Raised when a processor breaks its dispatch contract."""


class EntryResolveFailedError(ListhubError):
    """Raised by a resolver when a single entry cannot be resolved."""
