"""SQLite-backed registry of generated series entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sqlite3

from shelftree.catalog.models import CatalogEntry, Series


PRAGMA_BUSY_TIMEOUT_MS = 5000


@dataclass(slots=True)
class SeriesIndexRow:
    series_id: int
    name: str
    urn: str | None
    link: str | None


def ensure_schema(connection: sqlite3.Connection) -> None:
    """Create the series index table if missing."""

    connection.executescript(
        """
        CREATE TABLE IF NOT EXISTS series_index (
            series_id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            urn TEXT,
            link TEXT
        );

        CREATE INDEX IF NOT EXISTS idx_series_index_name ON series_index(name);
        """
    )


class SeriesSearchIndex:
    """Write-only sink: the catalog core never reads rows back."""

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._connection = sqlite3.connect(str(self._db_path))
        self._connection.row_factory = sqlite3.Row
        self._connection.execute(f"PRAGMA busy_timeout={PRAGMA_BUSY_TIMEOUT_MS};")
        ensure_schema(self._connection)
        self._connection.commit()

    @property
    def connection(self) -> sqlite3.Connection:
        return self._connection

    def close(self) -> None:
        self._connection.commit()
        self._connection.close()

    def __enter__(self) -> "SeriesSearchIndex":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def reset(self) -> None:
        """Drop rows from a previous run; every build starts from scratch."""

        with self._connection:
            self._connection.execute("DELETE FROM series_index")

    def add_series(self, series: Series, entry: CatalogEntry) -> None:
        with self._connection:
            self._connection.execute(
                """
                INSERT INTO series_index(series_id, name, urn, link)
                VALUES(?, ?, ?, ?)
                ON CONFLICT(series_id) DO UPDATE SET
                    name=excluded.name,
                    urn=excluded.urn,
                    link=excluded.link
                """,
                (series.id, series.name, entry.urn, entry.link),
            )

    def list_series(self) -> list[SeriesIndexRow]:
        rows = self._connection.execute(
            "SELECT series_id, name, urn, link FROM series_index ORDER BY series_id"
        ).fetchall()
        return [
            SeriesIndexRow(series_id=row["series_id"], name=row["name"], urn=row["urn"], link=row["link"])
            for row in rows
        ]
