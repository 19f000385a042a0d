"""Book collection sources."""

from .calibre_db import LibraryError, load_books

__all__ = ["LibraryError", "load_books"]
