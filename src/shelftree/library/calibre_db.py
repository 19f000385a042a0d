"""Read books and their series from a Calibre ``metadata.db``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sqlite3
from urllib.parse import quote

from shelftree.catalog.models import Book, Series
from shelftree.catalog.noise_words import normalize_language


_BOOKS_QUERY = """
SELECT
    b.id AS id,
    b.title AS title,
    b.series_index AS series_index,
    s.id AS series_id,
    s.name AS series_name,
    (
        SELECT l.lang_code
        FROM books_languages_link bll
        JOIN languages l ON l.id = bll.lang_code
        WHERE bll.book = b.id
        ORDER BY bll.item_order
        LIMIT 1
    ) AS lang_code
FROM books b
LEFT JOIN books_series_link bsl ON bsl.book = b.id
LEFT JOIN series s ON s.id = bsl.series
ORDER BY b.id
"""


@dataclass(slots=True)
class LibraryError(Exception):
    """Domain error for unreadable or malformed book libraries."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


def _connect(path: Path) -> sqlite3.Connection:
    if not path.is_file():
        raise LibraryError(path, "Library database not found")
    try:
        connection = sqlite3.connect(f"file:{quote(path.as_posix())}?mode=ro", uri=True)
    except sqlite3.Error as exc:
        raise LibraryError(path, f"Failed to open library database: {exc}") from exc
    connection.row_factory = sqlite3.Row
    return connection


def load_books(db_path: str | Path) -> list[Book]:
    """Return every book of the library in id order.

    Books sharing a series share one ``Series`` instance.  The series index
    is kept only for books that belong to a series.
    """

    path = Path(db_path)
    connection = _connect(path)
    try:
        rows = connection.execute(_BOOKS_QUERY).fetchall()
    except sqlite3.Error as exc:
        raise LibraryError(path, f"Failed to read books: {exc}") from exc
    finally:
        connection.close()

    series_by_id: dict[int, Series] = {}
    books: list[Book] = []
    for row in rows:
        series: Series | None = None
        series_index: float | None = None
        if row["series_id"] is not None:
            series_id = int(row["series_id"])
            series = series_by_id.get(series_id)
            if series is None:
                series = Series(id=series_id, name=row["series_name"] or "")
                series_by_id[series_id] = series
            if row["series_index"] is not None:
                series_index = float(row["series_index"])

        books.append(
            Book(
                id=int(row["id"]),
                title=row["title"],
                series=series,
                series_index=series_index,
                language=normalize_language(row["lang_code"]) or row["lang_code"],
            )
        )
    return books
