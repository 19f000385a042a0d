"""Derive the distinct series list and per-series members from a book collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from shelftree.catalog.models import Book, Series


@dataclass(frozen=True, slots=True)
class EntityGroup:
    """Series in first-seen order plus their member books, indexed by series id."""

    series: tuple[Series, ...]
    members: Mapping[int, tuple[Book, ...]]

    def members_of(self, series: Series) -> tuple[Book, ...]:
        return self.members.get(series.id, ())

    def __len__(self) -> int:
        return len(self.series)


def extract_groups(books: Iterable[Book]) -> EntityGroup:
    """Single pass grouping; books without a series are left out of the group."""

    ordered: list[Series] = []
    members: dict[int, list[Book]] = {}

    for book in books:
        series = book.series
        if series is None:
            continue
        bucket = members.get(series.id)
        if bucket is None:
            bucket = []
            members[series.id] = bucket
            ordered.append(series)
        bucket.append(book)

    return EntityGroup(
        series=tuple(ordered),
        members=MappingProxyType({series_id: tuple(items) for series_id, items in members.items()}),
    )


def _series_position(book: Book) -> float:
    if book.series_index is None:
        return float("-inf")
    return float(book.series_index)


def order_members(books: Sequence[Book]) -> list[Book]:
    """Stable sort by series index ascending; a missing index sorts first."""

    return sorted(books, key=_series_position)
