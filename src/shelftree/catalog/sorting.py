"""Locale-aware ordering of catalog titles."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar
import unicodedata

from shelftree.catalog.models import Series
from shelftree.catalog.noise_words import strip_leading_noise_words


T = TypeVar("T")

CollationKey = tuple[str, str, str]


def title_sort_key(title: str | None, language: str | None) -> str:
    """Return the upper-cased, noise-word stripped key used for ordering and bucketing."""
    if not title:
        return ""
    return strip_leading_noise_words(title.upper(), language)


def fold_text(text: str) -> str:
    """Accent- and case-folded form of *text* used as the primary collation strength."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def collation_key(title: str | None, language: str | None) -> CollationKey:
    """Build a total-order key: accent/case folded first, then exact key, then raw title."""
    sort_key = title_sort_key(title, language)
    return (fold_text(sort_key), sort_key, title or "")


def compare_titles(left: str | None, right: str | None, language: str | None) -> int:
    """Three-way comparison of two titles, returning -1, 0 or 1."""
    left_key = collation_key(left, language)
    right_key = collation_key(right, language)
    return (left_key > right_key) - (left_key < right_key)


def sort_by_title(
    items: Iterable[T],
    title_of: Callable[[T], str | None],
    language: str | None,
) -> list[T]:
    """Stable sort of arbitrary items by their collated title."""
    return sorted(items, key=lambda item: collation_key(title_of(item), language))


def sort_series(series: Iterable[Series], language: str | None) -> list[Series]:
    """Order series by name; equal names fall back to the series id."""
    return sorted(series, key=lambda item: (collation_key(item.name, language), item.id))
