"""Search-index sink for generated series pages."""

from .series_index import SeriesIndexRow, SeriesSearchIndex

__all__ = ["SeriesIndexRow", "SeriesSearchIndex"]
