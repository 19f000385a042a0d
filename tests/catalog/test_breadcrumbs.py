from __future__ import annotations

from shelftree.catalog.breadcrumbs import Breadcrumbs


def test_append_returns_a_new_trail_and_keeps_the_parent() -> None:
    root = Breadcrumbs().append("Series", "series_Page_1.xml")
    child = root.append("Series beginning with A", "series_A_Page_1.xml")
    sibling = root.append("Series beginning with B", "series_B_Page_1.xml")

    assert len(root) == 1
    assert child.crumbs[0] is root.crumbs[0]
    assert child.titles == ["Series", "Series beginning with A"]
    assert sibling.titles == ["Series", "Series beginning with B"]


def test_string_form_joins_titles_for_progress_messages() -> None:
    trail = Breadcrumbs().append("Series", "a.xml").append("", "b.xml").append("Letter D", "c.xml")

    assert str(trail) == "Series > Letter D"
    assert str(Breadcrumbs()) == ""
