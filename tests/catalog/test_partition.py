from __future__ import annotations

import pytest

from shelftree.catalog.models import Series
from shelftree.catalog.partition import OTHER_KEY, bucket_key, split_by_letter
from shelftree.catalog.sorting import sort_series


def _name(series: Series) -> str:
    return series.name


def test_noise_word_does_not_decide_the_bucket() -> None:
    assert bucket_key("The Hobbit", "en") == "H"


def test_titles_bucket_under_their_first_significant_letter() -> None:
    series = sort_series([Series(1, "Foo"), Series(2, "Bar"), Series(3, "The Zoo")], "en")

    buckets = split_by_letter(series, _name, "en")

    assert [bucket.key for bucket in buckets] == ["B", "F", "Z"]
    assert [[item.name for item in bucket.entities] for bucket in buckets] == [["Bar"], ["Foo"], ["The Zoo"]]


def test_non_alphabetic_and_empty_titles_use_the_other_bucket() -> None:
    assert bucket_key("1984", "en") == OTHER_KEY
    assert bucket_key("!Bang", "en") == OTHER_KEY
    assert bucket_key("", "en") == OTHER_KEY
    assert bucket_key(None, "en") == OTHER_KEY


def test_longer_prefixes_subdivide_a_bucket() -> None:
    assert bucket_key("Alpha", "en", prefix_length=2) == "AL"
    assert bucket_key("A", "en", prefix_length=2) == "A"

    with pytest.raises(ValueError, match="prefix_length"):
        bucket_key("Alpha", "en", prefix_length=0)


def test_accented_titles_bucket_under_their_base_letter() -> None:
    assert bucket_key("Éclair", "fr") == "E"
    assert bucket_key("L'Étranger", "fr", prefix_length=2) == "ET"
    assert bucket_key("Éclair", "fr", prefix_length=2) == "EC"


def test_accented_bucket_keeps_its_place_among_letters() -> None:
    series = sort_series(
        [Series(1, "Zebra"), Series(2, "Éclair"), Series(3, "Dune"), Series(4, "Fable")],
        "fr",
    )

    buckets = split_by_letter(series, _name, "fr")

    assert [bucket.key for bucket in buckets] == ["D", "E", "F", "Z"]
    assert [item for bucket in buckets for item in bucket.entities] == series


def test_buckets_concatenate_back_to_the_sorted_input() -> None:
    names = ["Zebra", "apple", "The Ant", "42 Tales", "Banana", "avocado", "Éclair", "berry"]
    series = sort_series([Series(index, name) for index, name in enumerate(names)], "en")

    buckets = split_by_letter(series, _name, "en")
    keys = [bucket.key for bucket in buckets]

    assert keys == [OTHER_KEY, "A", "B", "E", "Z"]
    assert [item for bucket in buckets for item in bucket.entities] == series
    assert [item.name for item in buckets[1].entities] == ["The Ant", "apple", "avocado"]


def test_empty_input_yields_no_buckets() -> None:
    assert split_by_letter([], _name, "en") == []
