"""Capability interfaces consumed by the catalog builders, with default implementations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from typing import Protocol, runtime_checkable

from shelftree.catalog.models import Book, CatalogEntry, CatalogPage, Series
from shelftree.catalog.noise_words import normalize_language


logger = logging.getLogger(__name__)


@runtime_checkable
class PageWriter(Protocol):
    """Durable sink for finalized pages; may raise ``OSError``."""

    def write_page(self, page: CatalogPage) -> None:
        """Persist one page under ``page.filename``."""


@runtime_checkable
class Summarizer(Protocol):
    def summarize_series(self, series: Sequence[Series]) -> str:
        """Return a short summary for a list of series."""

    def summarize_books(self, books: Sequence[Book]) -> str:
        """Return a short summary for a list of books."""


@runtime_checkable
class ProgressSink(Protocol):
    def show_message(self, message: str) -> None:
        """Display the breadcrumb trail of the entity being visited."""

    def advance(self) -> None:
        """Move the progress indicator one step forward."""


@runtime_checkable
class SearchIndexSink(Protocol):
    def add_series(self, series: Series, entry: CatalogEntry) -> None:
        """Register a finished series entry for search."""


_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "series.word": "Series",
        "content.series": "Series:",
        "series.other": "Other series",
        "series.letter": "{word} beginning with {letter}",
        "page.next": "Page {page} of {total}",
        "page.last": "Last page",
    },
    "fr": {
        "series.word": "Séries",
        "content.series": "Série :",
        "series.other": "Autres séries",
        "series.letter": "{word} commençant par {letter}",
        "page.next": "Page {page} sur {total}",
        "page.last": "Dernière page",
    },
    "de": {
        "series.word": "Serien",
        "content.series": "Serie:",
        "series.other": "Andere Serien",
        "series.letter": "{word} mit {letter}",
        "page.next": "Seite {page} von {total}",
        "page.last": "Letzte Seite",
    },
}


@dataclass(frozen=True, slots=True)
class Localizer:
    """Display strings for one locale; unknown locales fall back to English."""

    locale: str = "en"

    def text(self, key: str, **values: object) -> str:
        table = _STRINGS.get(normalize_language(self.locale) or "en", _STRINGS["en"])
        template = table.get(key, _STRINGS["en"][key])
        return template.format(**values)

    def letter_title(self, key: str) -> str:
        if key == "_":
            return self.text("series.other")
        letter = key[:1] + key[1:].lower()
        return self.text("series.letter", word=self.text("series.word"), letter=letter)

    def next_page_title(self, page: int, total: int) -> str:
        if page >= total:
            return self.text("page.last")
        return self.text("page.next", page=page, total=total)


@dataclass(frozen=True, slots=True)
class DefaultSummarizer:
    """List the first few titles, e.g. ``3 books: Dune, Dune Messiah, ...``."""

    max_titles: int = 5

    def _summarize(self, singular: str, plural: str, titles: Sequence[str]) -> str:
        shown = [title for title in titles[: self.max_titles] if title]
        text = f"{len(titles)} {singular if len(titles) == 1 else plural}"
        if shown:
            text += ": " + ", ".join(shown)
            if len(titles) > self.max_titles:
                text += ", ..."
        return text

    def summarize_series(self, series: Sequence[Series]) -> str:
        return self._summarize("series", "series", [item.name for item in series])

    def summarize_books(self, books: Sequence[Book]) -> str:
        return self._summarize("book", "books", [book.title or "" for book in books])


class LoggingProgress:
    """Progress sink that reports through ``logging`` and counts steps."""

    def __init__(self) -> None:
        self.steps = 0

    def show_message(self, message: str) -> None:
        logger.debug("Visiting %s", message)

    def advance(self) -> None:
        self.steps += 1
        if self.steps % 100 == 0:
            logger.info("Processed %d series", self.steps)


class SearchIndexRecorder:
    """In-memory search sink keeping ``(series, entry)`` pairs in arrival order."""

    def __init__(self) -> None:
        self.records: list[tuple[Series, CatalogEntry]] = []

    def add_series(self, series: Series, entry: CatalogEntry) -> None:
        self.records.append((series, entry))


@dataclass(slots=True)
class Capabilities:
    """Collaborators threaded through one catalog build."""

    writer: PageWriter
    summarizer: Summarizer = field(default_factory=DefaultSummarizer)
    progress: ProgressSink = field(default_factory=LoggingProgress)
    search_index: SearchIndexSink = field(default_factory=SearchIndexRecorder)
    localizer: Localizer = field(default_factory=Localizer)
