"""Generic grouped listing builder: letter-split or paginate at every level."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
import logging
from typing import Generic, TypeVar

from shelftree.catalog.breadcrumbs import Breadcrumbs
from shelftree.catalog.collaborators import Capabilities
from shelftree.catalog.models import CatalogEntry, CatalogPage, EntryKind
from shelftree.catalog.pagination import paginate
from shelftree.catalog.partition import OTHER_KEY, split_by_letter


logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_DELIMITER = "_Page_"
LINK_SUFFIX = ".xml"

LeafBuilder = Callable[[Breadcrumbs, T, str], CatalogEntry | None]


def page_filename(base: str, page_number: int) -> str:
    return f"{base}{PAGE_DELIMITER}{page_number}"


def page_link(base: str, page_number: int) -> str:
    return page_filename(base, page_number) + LINK_SUFFIX


@dataclass(frozen=True, slots=True)
class ListingRequest(Generic[T]):
    """Immutable descriptor of one listing page to generate."""

    breadcrumbs: Breadcrumbs
    entities: tuple[T, ...]
    title: str
    urn: str
    filename: str
    summary: str | None = None
    offset: int = 0
    split_depth: int = 0
    prefix_length: int = 1

    def successor(self, next_offset: int) -> "ListingRequest[T]":
        """Descriptor of the page that continues this listing at *next_offset*."""
        if next_offset <= self.offset:
            raise ValueError("next_offset must move forward")
        return replace(self, offset=next_offset)


@dataclass(frozen=True, slots=True)
class RenderedPage(Generic[T]):
    page: CatalogPage
    next_request: ListingRequest[T] | None = None


class GroupedTreeBuilder(Generic[T]):
    """Build a paginated, optionally letter-split, listing of entities.

    The entity type is opaque: ``title_of`` feeds letter bucketing, and
    ``leaf_builder`` turns one entity into its catalog entry (or ``None`` to
    omit it).  Pages are handed to ``capabilities.writer`` depth first, so
    every child page is written before the page that links to it.
    """

    def __init__(
        self,
        *,
        capabilities: Capabilities,
        page_capacity: int,
        split_threshold: int,
        language: str | None,
        title_of: Callable[[T], str | None],
        leaf_builder: LeafBuilder,
        summarize: Callable[[Sequence[T]], str] | None = None,
        letter_title: Callable[[str], str] | None = None,
        icon: str | None = None,
        allow_split: bool = True,
    ) -> None:
        if page_capacity < 1:
            raise ValueError("page_capacity must be >= 1")
        if split_threshold < 1:
            raise ValueError("split_threshold must be >= 1")
        self._capabilities = capabilities
        self._page_capacity = page_capacity
        self._split_threshold = split_threshold
        self._language = language
        self._title_of = title_of
        self._leaf_builder = leaf_builder
        self._summarize = summarize
        self._letter_title = letter_title or capabilities.localizer.letter_title
        self._icon = icon
        self._allow_split = allow_split

    def will_split(self, request: ListingRequest[T]) -> bool:
        return self._allow_split and request.split_depth > 0 and len(request.entities) > self._split_threshold

    def build(self, request: ListingRequest[T]) -> CatalogEntry | None:
        """Write every page of *request* and return the entry that links to its first page.

        A listing resumed past offset 0 is reached from its predecessor, so
        it is linked with a next-page entry instead of a content entry.
        """

        if not request.entities:
            return None

        first: CatalogPage | None = None
        for page in self.iter_pages(request):
            self._capabilities.writer.write_page(page)
            logger.debug("Wrote page %s (%d entries)", page.filename, len(page.entries))
            if first is None:
                first = page

        if request.offset > 0 and first is not None and first.page_number > 1:
            return CatalogEntry(
                kind=EntryKind.NEXT,
                title=self._capabilities.localizer.next_page_title(first.page_number, first.total_pages),
                link=page_link(request.filename, first.page_number),
            )

        return CatalogEntry(
            kind=EntryKind.CONTENT,
            title=request.title,
            link=page_link(request.filename, 1),
            urn=request.urn,
            summary=request.summary,
            icon=self._icon,
        )

    def iter_pages(self, request: ListingRequest[T]) -> Iterator[CatalogPage]:
        """Lazily render the pages of one listing, each from its predecessor's descriptor."""

        current: ListingRequest[T] | None = request
        while current is not None:
            rendered = self.render_page(current)
            yield rendered.page
            current = rendered.next_request

    def render_page(self, request: ListingRequest[T]) -> RenderedPage[T]:
        if self.will_split(request):
            return RenderedPage(page=self._render_split_page(request))
        return self._render_listing_page(request)

    def _render_split_page(self, request: ListingRequest[T]) -> CatalogPage:
        trail = request.breadcrumbs.append(request.title, page_link(request.filename, 1))
        entries: list[CatalogEntry] = []

        buckets = split_by_letter(
            request.entities,
            self._title_of,
            self._language,
            prefix_length=request.prefix_length,
        )
        logger.debug("Splitting %s into %d letter buckets", request.filename, len(buckets))
        for bucket in buckets:
            sub_request = ListingRequest(
                breadcrumbs=trail,
                entities=bucket.entities,
                title=self._letter_title(bucket.key),
                urn=f"{request.urn}:{bucket.key}",
                filename=f"{request.filename}_{bucket.key}",
                summary=self._summarize(bucket.entities) if self._summarize and bucket.entities else None,
                offset=0,
                split_depth=0 if bucket.key == OTHER_KEY else request.split_depth - 1,
                prefix_length=request.prefix_length + 1,
            )
            entry = self.build(sub_request)
            if entry is not None:
                entries.append(entry)

        return CatalogPage(
            filename=page_filename(request.filename, 1),
            title=request.title,
            urn=request.urn,
            breadcrumbs=request.breadcrumbs.crumbs,
            page_number=1,
            total_pages=1,
            entries=tuple(entries),
        )

    def _render_listing_page(self, request: ListingRequest[T]) -> RenderedPage[T]:
        page = paginate(request.entities, self._page_capacity, request.offset)
        trail = request.breadcrumbs.append(request.title, page_link(request.filename, page.number))

        entries: list[CatalogEntry] = []
        for entity in page.items:
            entry = self._leaf_builder(trail, entity, request.urn)
            if entry is not None:
                entries.append(entry)

        next_request: ListingRequest[T] | None = None
        if page.next_offset is not None:
            next_request = request.successor(page.next_offset)
            next_number = page.number + 1
            entries.append(
                CatalogEntry(
                    kind=EntryKind.NEXT,
                    title=self._capabilities.localizer.next_page_title(next_number, page.total_pages),
                    link=page_link(request.filename, next_number),
                )
            )

        return RenderedPage(
            page=CatalogPage(
                filename=page_filename(request.filename, page.number),
                title=request.title,
                urn=request.urn,
                breadcrumbs=request.breadcrumbs.crumbs,
                page_number=page.number,
                total_pages=page.total_pages,
                entries=tuple(entries),
            ),
            next_request=next_request,
        )
