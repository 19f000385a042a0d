"""Fixed-capacity pagination with a trailing next-page slot."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
import math
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of a listing; ``next_offset`` is set only when more items follow."""

    number: int
    total_pages: int
    offset: int
    items: tuple[T, ...]
    next_offset: int | None = None

    @property
    def is_truncated(self) -> bool:
        return self.next_offset is not None


def _check_capacity(page_capacity: int) -> None:
    if page_capacity < 1:
        raise ValueError("page_capacity must be >= 1")


def page_step(page_capacity: int) -> int:
    """Items held by a page that also carries a next-page link."""
    _check_capacity(page_capacity)
    return max(page_capacity - 1, 1)


def total_pages(item_count: int, page_capacity: int) -> int:
    step = page_step(page_capacity)
    if item_count <= 0:
        return 0
    if item_count <= page_capacity:
        return 1
    return 1 + math.ceil((item_count - page_capacity) / step)


def page_number(start_offset: int, page_capacity: int) -> int:
    return start_offset // page_step(page_capacity) + 1


def paginate(items: Sequence[T], page_capacity: int, start_offset: int = 0) -> Page[T]:
    """Return the page starting at *start_offset*.

    When more than *page_capacity* items remain, the last slot is given up
    to the next-page link and ``next_offset`` points past the emitted items.
    """
    step = page_step(page_capacity)
    if start_offset < 0:
        raise ValueError("start_offset cannot be negative")

    remaining = len(items) - start_offset
    if remaining > page_capacity:
        emitted = step
        next_offset: int | None = start_offset + emitted
    else:
        emitted = max(remaining, 0)
        next_offset = None

    return Page(
        number=page_number(start_offset, page_capacity),
        total_pages=max(total_pages(len(items), page_capacity), 1),
        offset=start_offset,
        items=tuple(items[start_offset : start_offset + emitted]),
        next_offset=next_offset,
    )


def iter_pages(items: Sequence[T], page_capacity: int) -> Iterator[Page[T]]:
    """Lazily walk every page of *items*, each produced from its predecessor's offset."""
    offset = 0
    while True:
        page = paginate(items, page_capacity, offset)
        yield page
        if page.next_offset is None:
            return
        offset = page.next_offset
