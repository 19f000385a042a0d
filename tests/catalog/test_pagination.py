from __future__ import annotations

import pytest

from shelftree.catalog.pagination import iter_pages, page_number, paginate, total_pages


def test_truncated_page_gives_its_last_slot_to_the_next_link() -> None:
    items = list(range(25))

    first = paginate(items, 20, 0)
    second = paginate(items, 20, first.next_offset)

    assert first.number == 1
    assert first.items == tuple(range(19))
    assert first.next_offset == 19
    assert first.is_truncated
    assert second.number == 2
    assert second.items == tuple(range(19, 25))
    assert second.next_offset is None
    assert first.total_pages == second.total_pages == 2


def test_listing_that_fits_is_a_single_page() -> None:
    page = paginate(list("abc"), 3, 0)

    assert page.items == ("a", "b", "c")
    assert page.next_offset is None
    assert page.total_pages == 1


@pytest.mark.parametrize("count", [0, 1, 5, 19, 20, 21, 39, 40, 58, 100])
def test_page_count_matches_walked_pages(count: int) -> None:
    items = list(range(count))

    pages = list(iter_pages(items, 20))

    assert len(pages) == max(total_pages(count, 20), 1)
    assert [item for page in pages for item in page.items] == items
    assert all(page.is_truncated for page in pages[:-1])
    assert not pages[-1].is_truncated
    assert [page.number for page in pages] == list(range(1, len(pages) + 1))


def test_capacity_of_one_still_makes_progress() -> None:
    pages = list(iter_pages(["a", "b", "c"], 1))

    assert [page.items for page in pages] == [("a",), ("b",), ("c",)]
    assert total_pages(3, 1) == 3


def test_page_number_follows_offsets() -> None:
    assert page_number(0, 20) == 1
    assert page_number(19, 20) == 2
    assert page_number(38, 20) == 3


def test_invalid_arguments_are_rejected() -> None:
    with pytest.raises(ValueError, match="page_capacity"):
        paginate([1, 2], 0)
    with pytest.raises(ValueError, match="start_offset"):
        paginate([1, 2], 2, -1)
