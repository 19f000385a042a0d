"""In-memory page sink used for dry runs."""

from __future__ import annotations

from shelftree.catalog.models import CatalogPage


class InMemoryPageStore:
    """Keep written pages in write order, addressable by filename."""

    def __init__(self) -> None:
        self.pages: list[CatalogPage] = []
        self._by_filename: dict[str, CatalogPage] = {}

    def write_page(self, page: CatalogPage) -> None:
        if page.filename in self._by_filename:
            raise ValueError(f"Page written twice: {page.filename}")
        self.pages.append(page)
        self._by_filename[page.filename] = page

    def get(self, filename: str) -> CatalogPage | None:
        return self._by_filename.get(filename)

    def by_link(self, link: str) -> CatalogPage | None:
        """Resolve an entry link (``<filename>.xml``) to the stored page."""
        filename, _, _ = link.rpartition(".")
        return self._by_filename.get(filename or link)

    def __len__(self) -> int:
        return len(self.pages)
