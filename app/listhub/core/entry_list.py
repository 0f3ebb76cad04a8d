"""The list aggregate.

EntryList owns a validated list definition together with the entries
and categories derived from it. It exposes the two pipeline phases:

- process(): expand sources through the processor chain, merge the
  discovered entries and organize them into a category tree.
- resolve(): enrich every entry through the resolver chain, dropping
  entries that fail or that no resolver supports.
"""

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from listhub.core.definition import InvalidDefinitionError
from listhub.core.errors import (
    EntryResolveFailedError,
    ListConfigurationError,
    ProcessorContractError,
)
from listhub.core.patterns import SourcePatterns
from listhub.core.taxonomy import CategoryTree
from listhub.models.category import Category
from listhub.models.definition import ListDefinition
from listhub.models.entry import Entry
from listhub.models.events import Emit, EntryCreated, ProcessorEvent, StatusUpdate
from listhub.models.source import Source
from listhub.processors.base import ProcessingAction, ProcessResult, SourceProcessor
from listhub.resolvers.base import EntryResolver
from listhub.utils.progress import NullProgress, ProgressIndicator

logger = logging.getLogger(__name__)

# C0 and C1 control characters stripped from category labels
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True, slots=True)
class ResolveStats:
    """Counters reported by EntryList.resolve().

    Attributes:
        total: Entries seen.
        resolved: Entries resolved successfully.
        cached: Resolved entries served from a resolver cache.
    """

    total: int = 0
    resolved: int = 0
    cached: int = 0

    @property
    def removed(self) -> int:
        return self.total - self.resolved


def _clean_labels(labels: Iterable[Any]) -> list[str]:
    """Strip control characters, trim, drop empty and duplicate labels."""
    cleaned: list[str] = []
    for label in labels:
        text = _CONTROL_CHARS.sub("", str(label)).strip()
        if text and text not in cleaned:
            cleaned.append(text)
    return cleaned


class EntryList:
    """A list definition and the entries and categories built from it.

    Example:
        >>> entry_list = EntryList(load_definition(path))
        >>> entry_list.process(processors)
        >>> entry_list.resolve(resolvers)
        >>> entry_list.entries, entry_list.categories
    """

    def __init__(
        self,
        data: ListDefinition | Mapping[str, Any],
        progress: ProgressIndicator | None = None,
    ) -> None:
        """Initialize the list from a definition.

        Args:
            data: Validated ListDefinition or raw definition mapping.
            progress: Progress indicator for human feedback.

        Raises:
            InvalidDefinitionError: If the raw definition is invalid.
        """
        self._progress = progress if progress is not None else NullProgress()
        self._entries: dict[str, Entry] = {}
        self._tree = CategoryTree()
        self._processed = False
        self._resolved = False
        self._load(data)

    def _load(self, data: ListDefinition | Mapping[str, Any]) -> None:
        if isinstance(data, ListDefinition):
            definition = data
        else:
            try:
                definition = ListDefinition.model_validate(data)
            except ValidationError as e:
                msg = f"Unable to process the list definition data; {e}"
                raise InvalidDefinitionError(msg) from e

        self._definition = definition
        self._data: dict[str, Any] = definition.model_dump(by_alias=True)

        # Merge list-level default options into every source
        defaults = definition.options.source
        self._sources = [
            Source(type=s.type, data=s.data, options=s.options).with_defaults(defaults)
            for s in definition.sources
        ]

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        """List id, lower-cased."""
        return self._definition.id.lower()

    @property
    def definition(self) -> ListDefinition:
        return self._definition

    @property
    def sources(self) -> list[Source]:
        """Root sources with default options applied."""
        return list(self._sources)

    @property
    def entries(self) -> dict[str, Entry]:
        """Entries keyed by id, in discovery order."""
        return dict(self._entries)

    @property
    def categories(self) -> dict[int, Category]:
        """Categories keyed by id."""
        return dict(self._tree.categories)

    @property
    def category_tree(self) -> CategoryTree:
        return self._tree

    @property
    def processed(self) -> bool:
        return self._processed

    @property
    def resolved(self) -> bool:
        return self._resolved

    def has(self, key: str) -> bool:
        """Check if the definition data holds a key."""
        return key in self._data

    def get(self, key: str | None = None) -> Any:
        """Get a definition data value, or the whole data when key is None.

        Raises:
            KeyError: If the key is undefined.
        """
        if key is None:
            return self._data
        if key not in self._data:
            msg = f"Trying to get an undefined list data key '{key}'"
            raise KeyError(msg)
        return self._data[key]

    def set(self, key: str, value: Any) -> None:
        """Set a definition data value.

        The updated definition is validated again and the root sources
        are rebuilt.

        Raises:
            ListConfigurationError: If the list is already processed.
            InvalidDefinitionError: If the updated definition is invalid.
        """
        if self._processed:
            msg = "Cannot change the definition of a processed list"
            raise ListConfigurationError(msg)
        self._load({**self._data, key: value})

    # -------------------------------------------------------------------------
    # Processing
    # -------------------------------------------------------------------------

    def process(self, processors: Sequence[SourceProcessor]) -> None:
        """Process all sources and organize entries into categories.

        Args:
            processors: Processor chain in priority order.

        Raises:
            ListConfigurationError: If no processors are given, or a source
                option or processor is misconfigured.
        """
        if not processors:
            msg = "Cannot process the list; No source processors have been provided"
            raise ListConfigurationError(msg)

        if self._processed:
            logger.info("List '%s' is already processed", self.id)
            return

        logger.info("Processing list sources")
        self._progress.start()
        try:
            self.process_sources(processors)
        finally:
            self._progress.end()
        logger.info("Processed %d entry(s)", len(self._entries))

        logger.info("Organizing categories")
        for entry in self._entries.values():
            category_ids: list[int] = []
            for label in _clean_labels(entry.categories):
                category_ids.extend(self._tree.insert(label, {"all": 1, entry.type: 1}))
            entry.categories = category_ids

        self._tree.apply_order(self._definition.options.category_order)
        self._processed = True
        logger.info("Organized %d category(s)", len(self._tree))

    def process_sources(
        self,
        processors: Sequence[SourceProcessor],
        sources: Sequence[Source] | None = None,
        depth: int = 0,
    ) -> None:
        """Recursively dispatch sources to the processor chain.

        The first processor not returning SKIP handles a source. Failures
        are isolated to the failing source.

        Args:
            processors: Processor chain in priority order.
            sources: Sources to process; the root sources when None.
            depth: Recursion depth, 0 for root sources.

        Raises:
            ListConfigurationError: On invalid patterns or a broken
                processor contract.
        """
        root = depth == 0
        prefix = "|_ " * depth
        if sources is None:
            sources = self._sources

        for index, source in enumerate(sources):
            label = f"index={index} {source.describe()}" if root else source.describe()
            patterns = SourcePatterns.compile(source)
            emit = self._make_emit(source, patterns)

            processor: SourceProcessor | None = None
            action = ProcessingAction.SKIP
            for candidate in processors:
                action = self._get_action(candidate, source)
                if action != ProcessingAction.SKIP:
                    processor = candidate
                    break

            if processor is None:
                logger.critical("Ignoring source[%s]; None of the given processors supports it", label)
                continue

            logger.info("%sProcessing source[%s] with '%s'", prefix, label, processor.name)
            try:
                result = self._run_processor(processor, source, emit, action)
            except ListConfigurationError:
                raise
            except Exception as e:
                logger.critical(
                    "Failed processing source[%s] with '%s'; %s", label, processor.name, e
                )
                continue

            if result is None:
                logger.critical("Failed processing source[%s] with '%s'", label, processor.name)
                continue

            if action == ProcessingAction.PARTIAL_PROCESSING:
                children = [item for item in result if isinstance(item, Source)]
                if not children:
                    logger.warning(
                        "No child sources from processing source[%s] with '%s'",
                        label,
                        processor.name,
                    )
                    continue
                self.process_sources(processors, children, depth + 1)
            else:
                for item in result:
                    if isinstance(item, Entry):
                        self.add_entry(item, source, patterns)

            logger.info("%sFinished processing source[%s]", prefix, label)

    def _get_action(self, processor: SourceProcessor, source: Source) -> ProcessingAction:
        action = processor.get_action(source)
        try:
            return ProcessingAction(action)
        except ValueError as e:
            msg = f"Got an invalid processing action {action!r} from processor '{processor.name}'"
            raise ProcessorContractError(msg) from e

    def _run_processor(
        self,
        processor: SourceProcessor,
        source: Source,
        emit: Emit,
        action: ProcessingAction,
    ) -> list[Source | Entry] | None:
        """Run a processor and normalize its return value.

        Returns:
            Child sources or entries, or None if the processor failed.

        Raises:
            ProcessorContractError: If the processor returns values of
                the wrong kind.
        """
        result: ProcessResult = processor.process(source, emit)
        if result is False:
            return None
        if result is None or result is True:
            return []
        items = [result] if isinstance(result, (Source, Entry)) else list(result)
        expected = Source if action == ProcessingAction.PARTIAL_PROCESSING else Entry
        for item in items:
            if not isinstance(item, expected):
                msg = (
                    f"Processor '{processor.name}' returned {type(item).__name__}, "
                    f"expected {expected.__name__}"
                )
                raise ProcessorContractError(msg)
        return items

    def _make_emit(self, source: Source, patterns: SourcePatterns) -> Emit:
        """Build the event callback handed to processors for one source."""

        def emit(event: ProcessorEvent) -> None:
            if isinstance(event, StatusUpdate):
                if event.is_error:
                    logger.warning("%s", event.message)
                else:
                    self._progress.update(event.message)
            elif isinstance(event, EntryCreated):
                self.add_entry(event.entry, source, patterns)
            else:
                msg = f"Unsupported source processor event {event!r}"
                raise ProcessorContractError(msg)

        return emit

    def add_entry(
        self,
        entry: Entry,
        source: Source,
        patterns: SourcePatterns | None = None,
    ) -> None:
        """Add an entry discovered from a source.

        Applies the source's exclude rules, merges into an existing entry
        with the same id, then assigns the source's categories.

        Args:
            entry: Newly discovered entry.
            source: Source the entry was discovered from.
            patterns: Pre-compiled source patterns.

        Raises:
            InvalidPatternError: If a source pattern is invalid.
            ListConfigurationError: If the list is already processed.
        """
        if self._processed:
            msg = "Cannot add entries to a processed list"
            raise ListConfigurationError(msg)

        if patterns is None:
            patterns = SourcePatterns.compile(source)

        if patterns.is_excluded(entry.id):
            logger.debug("Excluded entry [%s] from source[%s]", entry.id, source.describe())
            return

        existing = self._entries.get(entry.id)
        if existing is not None and existing is not entry:
            existing.merge(entry.to_dict())
            entry = existing

        if source.has_option("category"):
            entry.categories = [source.get_option("category")]
            self._entries[entry.id] = entry
            return

        entry.categories = [*entry.categories, *patterns.match_categories(entry.id)]
        self._entries[entry.id] = entry

    # -------------------------------------------------------------------------
    # Resolving
    # -------------------------------------------------------------------------

    def resolve(
        self,
        resolvers: Sequence[EntryResolver],
        force: bool = False,
    ) -> ResolveStats:
        """Resolve every entry with the first resolver supporting it.

        Args:
            resolvers: Resolver chain in priority order.
            force: Bypass resolver caches.

        Returns:
            ResolveStats with total, resolved and cached counts.

        Raises:
            ListConfigurationError: If the list is not processed, no
                resolvers are given, or there are no entries.
        """
        if not self._processed:
            msg = "Cannot resolve the list while it is not processed"
            raise ListConfigurationError(msg)
        if not resolvers:
            msg = "Cannot resolve the list; No resolvers have been provided"
            raise ListConfigurationError(msg)
        if not self._entries:
            msg = "No entries to resolve"
            raise ListConfigurationError(msg)

        logger.info("Resolving list entries")
        total = resolved = cached = 0

        self._progress.start()
        try:
            for entry in list(self._entries.values()):
                total += 1
                resolver = next((r for r in resolvers if r.supports(entry)), None)
                if resolver is None:
                    self.remove_entry(entry)
                    logger.warning(
                        "Ignoring entry#%d [%s] of type '%s'; None of the given resolvers supports it",
                        total,
                        entry.id,
                        entry.type,
                    )
                    continue

                is_cached = resolver.is_cached(entry)
                self._progress.update(f"Resolving entry#{total} => {entry.id}")
                try:
                    resolver.resolve(entry, force)
                except EntryResolveFailedError as e:
                    self.remove_entry(entry)
                    logger.warning(
                        "Failed resolving entry#%d [%s] with '%s'; %s",
                        total,
                        entry.id,
                        resolver.name,
                        e,
                    )
                    continue

                if is_cached and not force:
                    cached += 1
                resolved += 1
        finally:
            self._progress.end()

        self._resolved = True
        logger.info("Resolved %d/%d entry(s) with %d cached entry(s)", resolved, total, cached)
        return ResolveStats(total=total, resolved=resolved, cached=cached)

    def remove_entry(self, entry: Entry) -> None:
        """Remove an entry and release its category counts.

        Categories left without entries are deleted immediately. Entries
        no longer in the list are ignored.

        Raises:
            ListConfigurationError: If the list is not processed.
        """
        if not self._processed:
            msg = "Cannot remove an entry while the list is not processed"
            raise ListConfigurationError(msg)

        if self._entries.get(entry.id) is not entry:
            logger.debug("Entry %s is not in the list, nothing to remove", entry.id)
            return

        del self._entries[entry.id]
        for category_id in entry.categories:
            self._tree.release(category_id, entry.type)
