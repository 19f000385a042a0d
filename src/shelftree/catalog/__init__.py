"""Series catalog construction: ordering, grouping, letter splitting and pagination."""

from .breadcrumbs import Breadcrumbs
from .collaborators import Capabilities, DefaultSummarizer, Localizer, LoggingProgress, SearchIndexRecorder
from .config import CatalogSettings
from .models import Book, CatalogEntry, CatalogPage, EntryKind, Series
from .series import CatalogScope, SeriesCatalog

__all__ = [
    "Book",
    "Breadcrumbs",
    "Capabilities",
    "CatalogEntry",
    "CatalogPage",
    "CatalogScope",
    "CatalogSettings",
    "DefaultSummarizer",
    "EntryKind",
    "Localizer",
    "LoggingProgress",
    "SearchIndexRecorder",
    "Series",
    "SeriesCatalog",
]
