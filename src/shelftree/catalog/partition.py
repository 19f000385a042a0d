"""Bucket an ordered entity list by the leading letters of its sort keys."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from shelftree.catalog.models import LetterBucket
from shelftree.catalog.sorting import fold_text, title_sort_key


T = TypeVar("T")

OTHER_KEY = "_"


def bucket_key(title: str | None, language: str | None, *, prefix_length: int = 1) -> str:
    """Return the first *prefix_length* folded letters of the sort key, or ``"_"`` for non-alphabetic keys.

    Keys use the same accent folding as the collation, so ``"Éclair"``
    buckets under ``"E"`` (``"EC"`` one level deeper).
    """
    if prefix_length < 1:
        raise ValueError("prefix_length must be >= 1")
    folded = fold_text(title_sort_key(title, language))
    if not folded or not folded[0].isalpha():
        return OTHER_KEY
    return folded[:prefix_length].upper()


def split_by_letter(
    entities: Sequence[T],
    title_of: Callable[[T], str | None],
    language: str | None,
    *,
    prefix_length: int = 1,
) -> list[LetterBucket]:
    """Partition collation-ordered *entities* into letter buckets.

    Buckets come out in the order their first member appears in
    *entities*, so concatenating them gives back *entities* unchanged;
    for letter keys this is ascending key order, and the ``"_"`` bucket
    sits where non-alphabetic titles collate.  Relative order inside each
    bucket follows *entities*; an empty input yields no buckets.
    """
    grouped: dict[str, list[T]] = {}
    for entity in entities:
        key = bucket_key(title_of(entity), language, prefix_length=prefix_length)
        grouped.setdefault(key, []).append(entity)

    return [LetterBucket(key=key, entities=tuple(members)) for key, members in grouped.items()]
