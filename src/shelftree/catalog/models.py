"""Canonical data structures shared by the catalog builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class Series:
    """A named series owned by the book collection; equal by id."""

    id: int
    name: str = field(compare=False)


@dataclass(frozen=True, slots=True)
class Book:
    """One book as read from the source collection."""

    id: int
    title: str | None
    series: Series | None = None
    series_index: float | None = None
    language: str | None = None


class EntryKind(str, Enum):
    CONTENT = "content"
    NEXT = "next"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One entry of a catalog page: a content entry or a next-page link."""

    kind: EntryKind
    title: str
    link: str | None
    urn: str | None = None
    summary: str | None = None
    icon: str | None = None

    @property
    def is_next_link(self) -> bool:
        return self.kind is EntryKind.NEXT


@dataclass(frozen=True, slots=True)
class LetterBucket:
    key: str
    entities: tuple


@dataclass(frozen=True, slots=True)
class CatalogPage:
    """A finalized page handed to the page persistence sink."""

    filename: str
    title: str
    urn: str
    breadcrumbs: tuple[tuple[str, str], ...]
    page_number: int
    total_pages: int
    entries: tuple[CatalogEntry, ...]

    @property
    def content_entries(self) -> tuple[CatalogEntry, ...]:
        return tuple(entry for entry in self.entries if not entry.is_next_link)

    @property
    def next_link(self) -> CatalogEntry | None:
        for entry in self.entries:
            if entry.is_next_link:
                return entry
        return None
