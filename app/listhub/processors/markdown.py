"""Markdown source processor.

Parses curated markdown lists ("awesome lists"). Section headings form
the category path of the links listed below them:

    ## Tools
    ### Command Line
    - [httpie](https://github.com/httpie/cli) - Modern HTTP client.

yields a 'github' entry 'httpie/cli' in category 'Tools/Command Line'.
"""

import logging
import re
from pathlib import Path

from listhub.models.entry import Entry
from listhub.models.events import Emit, EntryCreated, StatusUpdate
from listhub.models.source import Source
from listhub.processors.base import ProcessingAction, SourceProcessor, source_path

logger = logging.getLogger(__name__)

_HEADING = re.compile(r"^(?P<marks>#{1,6})\s+(?P<title>.+?)\s*#*\s*$")
_LIST_ITEM = re.compile(
    r"^\s*[-*+]\s+\[(?P<title>[^\]]+)\]\((?P<url>[^)\s]+)\)"
    r"(?:\s*[-–—:]\s*(?P<description>.*))?"
)
_GITHUB_REPO = re.compile(
    r"^https?://(?:www\.)?github\.com/(?P<owner>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?/?(?:[#?].*)?$",
    re.IGNORECASE,
)
_HEADING_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_EMPHASIS = re.compile(r"[*_`]")

DEFAULT_SKIP_SECTIONS = ("Contents", "Table of Contents")


def _clean_heading(title: str) -> str:
    """Strip links and emphasis markers from a heading title."""
    title = _HEADING_LINK.sub(r"\1", title)
    return _EMPHASIS.sub("", title).strip()


def parse_link(title: str, url: str, description: str | None) -> Entry | None:
    """Build an entry from a markdown link.

    GitHub repository links become 'github' entries keyed by
    'owner/repo'; other http(s) links become 'link' entries keyed by URL.

    Returns:
        Entry, or None for relative links and anchors.
    """
    attributes: dict[str, str] = {"title": title.strip()}
    if description:
        attributes["description"] = description.strip()

    match = _GITHUB_REPO.match(url)
    if match is not None:
        repo_id = f"{match.group('owner')}/{match.group('repo')}"
        attributes["url"] = f"https://github.com/{repo_id}"
        return Entry(id=repo_id, type="github", attributes=attributes)

    if url.startswith(("http://", "https://")):
        attributes["url"] = url
        return Entry(id=url, type="link", attributes=attributes)

    return None


class MarkdownProcessor(SourceProcessor):
    """Processor for markdown link lists.

    Source options:
        skipSections: Section titles whose links are ignored.
        minHeadingLevel: Shallowest heading level used as a category
            (default 2, so the document title is not a category).
    """

    SOURCE_TYPE = "markdown"

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir if base_dir is not None else Path.cwd()

    def get_action(self, source: Source) -> ProcessingAction:
        if source.type == self.SOURCE_TYPE:
            return ProcessingAction.PROCESSING
        return ProcessingAction.SKIP

    def process(self, source: Source, emit: Emit) -> bool:
        """Emit an entry for every link item in the document.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the source data is not a path.
        """
        path = source_path(source, self._base_dir)
        text = path.read_text(encoding="utf-8")

        skip = {s.casefold() for s in source.get_option("skipSections", DEFAULT_SKIP_SECTIONS)}
        min_level = int(source.get_option("minHeadingLevel", 2))

        # (level, title) of the enclosing sections
        sections: list[tuple[int, str]] = []
        skipped_level: int | None = None
        found = 0

        for line_num, line in enumerate(text.splitlines(), start=1):
            heading = _HEADING.match(line)
            if heading is not None:
                level = len(heading.group("marks"))
                if level < min_level:
                    continue
                title = _clean_heading(heading.group("title"))

                if skipped_level is not None and level > skipped_level:
                    continue
                skipped_level = None

                sections = [s for s in sections if s[0] < level]
                if title.casefold() in skip:
                    skipped_level = level
                    continue

                sections.append((level, title))
                emit(StatusUpdate(f"Processing section {self._label(sections)}"))
                continue

            if skipped_level is not None:
                continue

            item = _LIST_ITEM.match(line)
            if item is None:
                continue

            entry = parse_link(item.group("title"), item.group("url"), item.group("description"))
            if entry is None:
                logger.debug("Skipping non-http link on line %d of %s", line_num, path)
                continue

            label = self._label(sections)
            if label:
                entry.categories = [label]
            emit(EntryCreated(entry))
            found += 1

        if not found:
            emit(StatusUpdate(f"No links found in {path}", level="error"))
        logger.debug("Found %d link(s) in %s", found, path)
        return True

    @staticmethod
    def _label(sections: list[tuple[int, str]]) -> str:
        return "/".join(title.replace("/", " ") for _, title in sections)
