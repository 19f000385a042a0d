from __future__ import annotations

from shelftree.catalog.grouping import extract_groups, order_members
from shelftree.catalog.models import Book, Series


def test_series_are_listed_once_in_first_seen_order() -> None:
    dune = Series(1, "Dune")
    expanse = Series(2, "The Expanse")
    books = [
        Book(10, "Leviathan Wakes", expanse, 1.0),
        Book(11, "Dune", dune, 1.0),
        Book(12, "Caliban's War", expanse, 2.0),
        Book(13, "Dune Messiah", Series(1, "Dune (renamed)"), 2.0),
    ]

    group = extract_groups(books)

    assert group.series == (expanse, dune)
    assert len(group) == 2
    assert [book.id for book in group.members_of(expanse)] == [10, 12]
    assert [book.id for book in group.members_of(dune)] == [11, 13]


def test_books_without_series_are_left_out() -> None:
    books = [Book(1, "Standalone"), Book(2, "Other", None, 3.0)]

    group = extract_groups(books)

    assert group.series == ()
    assert dict(group.members) == {}


def test_unknown_series_has_no_members() -> None:
    group = extract_groups([Book(1, "A", Series(1, "One"))])

    assert group.members_of(Series(99, "Missing")) == ()


def test_members_sort_by_series_index_with_missing_index_first() -> None:
    series = Series(1, "Saga")
    books = [
        Book(1, "Third", series, 3.0),
        Book(2, "Unnumbered A", series, None),
        Book(3, "First", series, 1.0),
        Book(4, "Unnumbered B", series, None),
        Book(5, "First again", series, 1.0),
    ]

    ordered = order_members(books)

    assert [book.id for book in ordered] == [2, 4, 3, 5, 1]
