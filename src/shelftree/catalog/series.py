"""Series catalog: the grouped tree builder wired to series and their books."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging

from shelftree.catalog.breadcrumbs import Breadcrumbs
from shelftree.catalog.collaborators import Capabilities
from shelftree.catalog.config import CatalogSettings
from shelftree.catalog.grouping import EntityGroup, extract_groups, order_members
from shelftree.catalog.models import Book, CatalogEntry, EntryKind, Series
from shelftree.catalog.sorting import sort_series
from shelftree.catalog.tree import GroupedTreeBuilder, ListingRequest, RenderedPage


logger = logging.getLogger(__name__)

DEFAULT_URN = "urn:shelftree:series"
ICON_SERIES = "series.png"
ICON_BOOK = "book.png"


@dataclass(frozen=True, slots=True)
class CatalogScope:
    """Where series pages live: top level, or inside another grouping's folder."""

    folder: str = ""

    @property
    def nested(self) -> bool:
        return bool(self.folder)

    @property
    def base_filename(self) -> str:
        return f"{self.folder}_series" if self.nested else "series"

    def series_filename(self, series_id: int) -> str:
        return f"{self.base_filename}_{series_id}"


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Data derived once per build: the grouping and the sorted series list."""

    group: EntityGroup
    ordered_series: tuple[Series, ...]
    language: str

    @classmethod
    def from_books(cls, books: Iterable[Book], language: str) -> "BuildContext":
        group = extract_groups(books)
        return cls(group=group, ordered_series=tuple(sort_series(group.series, language)), language=language)


class SeriesCatalog:
    """Build the series sub-catalog of a book collection."""

    def __init__(
        self,
        books: Iterable[Book],
        *,
        settings: CatalogSettings,
        capabilities: Capabilities,
        scope: CatalogScope | None = None,
    ) -> None:
        self._settings = settings
        self._capabilities = capabilities
        self._scope = scope or CatalogScope()
        self._context = BuildContext.from_books(books, settings.locale)

        self._series_builder: GroupedTreeBuilder[Series] = GroupedTreeBuilder(
            capabilities=capabilities,
            page_capacity=settings.page_capacity,
            split_threshold=settings.split_threshold,
            language=settings.locale,
            title_of=lambda series: series.name,
            leaf_builder=self._build_series_entry,
            summarize=capabilities.summarizer.summarize_series,
            icon=ICON_SERIES,
        )
        # Letter splitting inside a single series is never wanted.
        self._books_builder: GroupedTreeBuilder[Book] = GroupedTreeBuilder(
            capabilities=capabilities,
            page_capacity=settings.page_capacity,
            split_threshold=settings.split_threshold,
            language=settings.locale,
            title_of=lambda book: book.title,
            leaf_builder=self._build_book_entry,
            icon=ICON_SERIES,
            allow_split=False,
        )

    @property
    def context(self) -> BuildContext:
        return self._context

    def root_request(
        self,
        *,
        title: str,
        breadcrumbs: Breadcrumbs | None = None,
        series: Sequence[Series] | None = None,
        summary: str | None = None,
        urn: str = DEFAULT_URN,
        filename: str | None = None,
        offset: int = 0,
    ) -> ListingRequest[Series]:
        """Describe a series listing; ``series=None`` means every series of the collection."""

        entities = self._context.ordered_series if series is None else tuple(series)
        if summary is None and entities:
            summary = self._capabilities.summarizer.summarize_series(entities)
        return ListingRequest(
            breadcrumbs=breadcrumbs or Breadcrumbs(),
            entities=entities,
            title=title,
            urn=urn,
            filename=filename or self._scope.base_filename,
            summary=summary,
            offset=offset,
            split_depth=self._settings.max_split_depth,
        )

    def build(self, *, title: str | None = None, **request_options) -> CatalogEntry | None:
        """Write the whole series tree and return the entry linking to its first page."""

        request = self.root_request(
            title=title or self._capabilities.localizer.text("series.word"),
            **request_options,
        )
        logger.info("Building series catalog: %d series", len(request.entities))
        return self._series_builder.build(request)

    def render_page(self, request: ListingRequest[Series]) -> RenderedPage[Series]:
        """Render only the page described by *request*; leaf series pages are still written."""

        return self._series_builder.render_page(request)

    def _build_series_entry(self, breadcrumbs: Breadcrumbs, series: Series, parent_urn: str) -> CatalogEntry | None:
        logger.debug("%s/%s", breadcrumbs, series.name)
        progress = self._capabilities.progress
        progress.show_message(str(breadcrumbs))
        if not self._scope.nested:
            progress.advance()

        books = self._context.group.members_of(series)
        if not books:
            return None

        ordered = order_members(books)
        title = series.name
        if self._settings.series_word_in_title:
            title = f"{self._capabilities.localizer.text('content.series')} {title}"

        request: ListingRequest[Book] = ListingRequest(
            breadcrumbs=breadcrumbs,
            entities=tuple(ordered),
            title=title,
            urn=f"{parent_urn}:series:{series.id}",
            filename=self._scope.series_filename(series.id),
            summary=self._capabilities.summarizer.summarize_books(ordered),
        )
        entry = self._books_builder.build(request)
        if entry is not None:
            self._capabilities.search_index.add_series(series, entry)
        return entry

    def _build_book_entry(self, breadcrumbs: Breadcrumbs, book: Book, parent_urn: str) -> CatalogEntry:
        title = book.title or ""
        if self._settings.series_number_in_title and book.series_index is not None:
            title = f"[{book.series_index:g}] {title}"
        return CatalogEntry(
            kind=EntryKind.CONTENT,
            title=title,
            link=None,
            urn=f"{parent_urn}:book:{book.id}",
            icon=ICON_BOOK,
        )
