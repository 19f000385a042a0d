"""Atom/OPDS serialization of catalog pages with lxml."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from shelftree.catalog.models import CatalogEntry, CatalogPage


logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
NAVIGATION_TYPE = "application/atom+xml;profile=opds-catalog;kind=navigation"
THUMBNAIL_REL = "http://opds-spec.org/image/thumbnail"


def _atom(tag: str) -> str:
    return f"{{{ATOM_NS}}}{tag}"


def _link(parent: etree._Element, *, rel: str, href: str, title: str | None = None) -> etree._Element:
    link = etree.SubElement(parent, _atom("link"), rel=rel, href=href, type=NAVIGATION_TYPE)
    if title:
        link.set("title", title)
    return link


def _append_entry(feed: etree._Element, entry: CatalogEntry) -> None:
    node = etree.SubElement(feed, _atom("entry"))
    etree.SubElement(node, _atom("title")).text = entry.title
    if entry.urn:
        etree.SubElement(node, _atom("id")).text = entry.urn
    if entry.summary:
        content = etree.SubElement(node, _atom("content"), type="text")
        content.text = entry.summary
    if entry.link:
        _link(node, rel="next" if entry.is_next_link else "subsection", href=entry.link, title=entry.title)
    if entry.icon:
        etree.SubElement(node, _atom("link"), rel=THUMBNAIL_REL, href=entry.icon)


def render_page(page: CatalogPage) -> bytes:
    """Serialize one page as an Atom feed document."""

    feed = etree.Element(_atom("feed"), nsmap={None: ATOM_NS})
    etree.SubElement(feed, _atom("id")).text = page.urn
    etree.SubElement(feed, _atom("title")).text = page.title
    _link(feed, rel="self", href=f"{page.filename}.xml")

    if page.breadcrumbs:
        root_title, root_link = page.breadcrumbs[0]
        _link(feed, rel="start", href=root_link, title=root_title)
        up_title, up_link = page.breadcrumbs[-1]
        _link(feed, rel="up", href=up_link, title=up_title)

    next_link = page.next_link
    if next_link is not None and next_link.link:
        _link(feed, rel="next", href=next_link.link, title=next_link.title)

    for entry in page.entries:
        _append_entry(feed, entry)

    return etree.tostring(feed, xml_declaration=True, encoding="utf-8", pretty_print=True)


class AtomFeedWriter:
    """Write each page to ``<output_dir>/<filename>.xml``; ``OSError`` propagates."""

    def __init__(self, output_dir: str | Path) -> None:
        self._output_dir = Path(output_dir)
        self.pages_written = 0

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def write_page(self, page: CatalogPage) -> None:
        target = self._output_dir / f"{page.filename}.xml"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(render_page(page))
        self.pages_written += 1
        logger.debug("Saved %s", target)
