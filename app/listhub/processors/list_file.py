"""List file source processor.

Expands a source pointing at another definition file into the sources
that file declares, so large lists can be split across files:

    [[sources]]
    type = "list"
    data = "lists/python.toml"
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from listhub.core.definition import DefinitionParseError, read_definition_data
from listhub.models.definition import SourceDefinition
from listhub.models.events import Emit, StatusUpdate
from listhub.models.source import Source, merge_options
from listhub.processors.base import ProcessingAction, SourceProcessor, source_path

logger = logging.getLogger(__name__)


class ListFileProcessor(SourceProcessor):
    """Processor expanding a TOML/JSON file into child sources.

    Child sources inherit the parent source's options; options set on
    the child win. Relative paths are resolved against base_dir.
    """

    SOURCE_TYPE = "list"

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir if base_dir is not None else Path.cwd()

    def get_action(self, source: Source) -> ProcessingAction:
        if source.type == self.SOURCE_TYPE:
            return ProcessingAction.PARTIAL_PROCESSING
        return ProcessingAction.SKIP

    def process(self, source: Source, emit: Emit) -> list[Source]:
        """Read the file and return its sources.

        Invalid child sources are reported and skipped.

        Raises:
            DefinitionError: If the file is missing or unparsable.
            ValueError: If the source data is not a path.
        """
        path = source_path(source, self._base_dir)
        emit(StatusUpdate(f"Reading {path}"))

        data = read_definition_data(path)
        raw_sources = data.get("sources", [])
        if not isinstance(raw_sources, list):
            raise DefinitionParseError(f"'sources' must be a list in {path}")

        children: list[Source] = []
        for index, raw in enumerate(raw_sources):
            try:
                child = SourceDefinition.model_validate(raw)
            except ValidationError as e:
                emit(StatusUpdate(f"Skipping invalid source #{index} in {path}: {e}", level="error"))
                continue
            children.append(
                Source(
                    type=child.type,
                    data=child.data,
                    options=merge_options(source.options, child.options),
                )
            )

        logger.debug("Expanded %s into %d source(s)", path, len(children))
        return children
