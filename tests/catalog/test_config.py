from __future__ import annotations

import pytest

from shelftree.catalog.config import (
    DEFAULT_MAX_SPLIT_DEPTH,
    DEFAULT_PAGE_CAPACITY,
    DEFAULT_SPLIT_THRESHOLD,
    CatalogSettings,
)


def test_settings_defaults_apply_for_empty_environment() -> None:
    settings = CatalogSettings.from_env({})

    assert settings.split_threshold == DEFAULT_SPLIT_THRESHOLD
    assert settings.page_capacity == DEFAULT_PAGE_CAPACITY
    assert settings.max_split_depth == DEFAULT_MAX_SPLIT_DEPTH
    assert settings.locale == "en"
    assert settings.series_word_in_title is False
    assert settings.series_number_in_title is True


def test_settings_load_from_env() -> None:
    settings = CatalogSettings.from_env(
        {
            "SHELFTREE_SPLIT_THRESHOLD": "500",
            "SHELFTREE_PAGE_CAPACITY": " 25 ",
            "SHELFTREE_MAX_SPLIT_DEPTH": "0",
            "SHELFTREE_LOCALE": "fr",
            "SHELFTREE_SERIES_WORD_IN_TITLE": "yes",
            "SHELFTREE_SERIES_NUMBER_IN_TITLE": "off",
        }
    )

    assert settings == CatalogSettings(
        split_threshold=500,
        page_capacity=25,
        max_split_depth=0,
        locale="fr",
        series_word_in_title=True,
        series_number_in_title=False,
    )


def test_invalid_values_name_the_variable() -> None:
    with pytest.raises(ValueError, match="SHELFTREE_PAGE_CAPACITY"):
        CatalogSettings.from_env({"SHELFTREE_PAGE_CAPACITY": "0"})
    with pytest.raises(ValueError, match="SHELFTREE_SPLIT_THRESHOLD"):
        CatalogSettings.from_env({"SHELFTREE_SPLIT_THRESHOLD": "many"})
    with pytest.raises(ValueError, match="SHELFTREE_MAX_SPLIT_DEPTH"):
        CatalogSettings.from_env({"SHELFTREE_MAX_SPLIT_DEPTH": "-1"})
    with pytest.raises(ValueError, match="SHELFTREE_LOCALE"):
        CatalogSettings.from_env({"SHELFTREE_LOCALE": "  "})
    with pytest.raises(ValueError, match="SHELFTREE_SERIES_WORD_IN_TITLE"):
        CatalogSettings.from_env({"SHELFTREE_SERIES_WORD_IN_TITLE": "maybe"})


def test_direct_construction_is_validated() -> None:
    with pytest.raises(ValueError, match="page_capacity"):
        CatalogSettings(page_capacity=0)
