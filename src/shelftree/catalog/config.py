"""Runtime configuration for catalog generation."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_SPLIT_THRESHOLD = 100
DEFAULT_PAGE_CAPACITY = 50
DEFAULT_MAX_SPLIT_DEPTH = 1
DEFAULT_LOCALE = "en"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_int(*, name: str, raw_value: str, minimum: int) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_bool(*, name: str, raw_value: str) -> bool:
    lowered = raw_value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw_value!r}")


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """Validated thresholds and display options for one catalog build."""

    split_threshold: int = DEFAULT_SPLIT_THRESHOLD
    page_capacity: int = DEFAULT_PAGE_CAPACITY
    max_split_depth: int = DEFAULT_MAX_SPLIT_DEPTH
    locale: str = DEFAULT_LOCALE
    series_word_in_title: bool = False
    series_number_in_title: bool = True

    def __post_init__(self) -> None:
        if self.split_threshold < 1:
            raise ValueError("split_threshold must be >= 1")
        if self.page_capacity < 1:
            raise ValueError("page_capacity must be >= 1")
        if self.max_split_depth < 0:
            raise ValueError("max_split_depth must be >= 0")
        if not self.locale:
            raise ValueError("locale cannot be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CatalogSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        split_raw = source.get("SHELFTREE_SPLIT_THRESHOLD", str(DEFAULT_SPLIT_THRESHOLD)).strip()
        capacity_raw = source.get("SHELFTREE_PAGE_CAPACITY", str(DEFAULT_PAGE_CAPACITY)).strip()
        depth_raw = source.get("SHELFTREE_MAX_SPLIT_DEPTH", str(DEFAULT_MAX_SPLIT_DEPTH)).strip()
        locale_raw = source.get("SHELFTREE_LOCALE", DEFAULT_LOCALE).strip()
        series_word_raw = source.get("SHELFTREE_SERIES_WORD_IN_TITLE", "false").strip()
        series_number_raw = source.get("SHELFTREE_SERIES_NUMBER_IN_TITLE", "true").strip()

        if not split_raw:
            raise ValueError("SHELFTREE_SPLIT_THRESHOLD cannot be empty")
        if not capacity_raw:
            raise ValueError("SHELFTREE_PAGE_CAPACITY cannot be empty")
        if not depth_raw:
            raise ValueError("SHELFTREE_MAX_SPLIT_DEPTH cannot be empty")
        if not locale_raw:
            raise ValueError("SHELFTREE_LOCALE cannot be empty")

        return cls(
            split_threshold=_parse_int(name="SHELFTREE_SPLIT_THRESHOLD", raw_value=split_raw, minimum=1),
            page_capacity=_parse_int(name="SHELFTREE_PAGE_CAPACITY", raw_value=capacity_raw, minimum=1),
            max_split_depth=_parse_int(name="SHELFTREE_MAX_SPLIT_DEPTH", raw_value=depth_raw, minimum=0),
            locale=locale_raw,
            series_word_in_title=_parse_bool(name="SHELFTREE_SERIES_WORD_IN_TITLE", raw_value=series_word_raw),
            series_number_in_title=_parse_bool(
                name="SHELFTREE_SERIES_NUMBER_IN_TITLE",
                raw_value=series_number_raw,
            ),
        )
