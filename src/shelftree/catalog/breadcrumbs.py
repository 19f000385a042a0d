"""Immutable navigation trail from the catalog root to a page."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Breadcrumbs:
    """Ordered ``(title, link)`` pairs; ``append`` never touches the parent trail."""

    crumbs: tuple[tuple[str, str], ...] = ()

    def append(self, title: str, link: str) -> "Breadcrumbs":
        return Breadcrumbs(crumbs=self.crumbs + ((title, link),))

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.crumbs]

    def __len__(self) -> int:
        return len(self.crumbs)

    def __str__(self) -> str:
        return " > ".join(title for title in self.titles if title)
