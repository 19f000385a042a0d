from __future__ import annotations

from shelftree.catalog.collaborators import DefaultSummarizer, Localizer
from shelftree.catalog.models import Book, Series


def test_letter_titles_are_localized() -> None:
    localizer = Localizer("en")

    assert localizer.letter_title("B") == "Series beginning with B"
    assert localizer.letter_title("AB") == "Series beginning with Ab"
    assert localizer.letter_title("_") == "Other series"
    assert Localizer("fra").letter_title("_") == "Autres séries"
    assert Localizer("xx").letter_title("_") == "Other series"


def test_next_page_titles_mark_the_last_page() -> None:
    localizer = Localizer("en")

    assert localizer.next_page_title(2, 3) == "Page 2 of 3"
    assert localizer.next_page_title(3, 3) == "Last page"


def test_summaries_list_a_limited_number_of_titles() -> None:
    summarizer = DefaultSummarizer(max_titles=2)
    books = [Book(1, "Dune"), Book(2, "Dune Messiah"), Book(3, "Children of Dune")]

    assert summarizer.summarize_books(books) == "3 books: Dune, Dune Messiah, ..."
    assert summarizer.summarize_books(books[:1]) == "1 book: Dune"
    assert summarizer.summarize_series([Series(1, "Dune")]) == "1 series: Dune"
