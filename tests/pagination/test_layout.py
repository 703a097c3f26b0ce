from __future__ import annotations

import pytest

from codedoc.pagination.distribution import distribute_pages
from codedoc.pagination.layout import build_layout
from codedoc.pagination.models import PageBreak, Section, TextLine
from codedoc.pagination.selection import select_sections


def test_end_to_end_all_section_layout() -> None:
    lines = ["line1", "", "line2", "line3"]
    distribution = distribute_pages(lines, 2)
    (section,) = select_sections("all", distribution, lines=lines)

    layout = build_layout(section, 2)

    assert layout.units == (TextLine("line1"), TextLine("line2"), PageBreak(), TextLine("line3"))
    assert layout.actual_page_count == 2
    assert layout.rendered_page_count == 2


def test_empty_section_yields_no_units() -> None:
    layout = build_layout(Section(start_page=1, end_page=0, lines=("", "  ")), 3)

    assert layout.units == ()
    assert layout.actual_page_count == 0
    assert layout.rendered_page_count == 0


def test_exact_multiple_has_no_trailing_break() -> None:
    layout = build_layout(Section(start_page=7, end_page=8, lines=("a", "b", "c", "d")), 2)

    assert [type(unit) for unit in layout.units] == [TextLine, TextLine, PageBreak, TextLine, TextLine]
    assert layout.start_page == 7
    assert layout.actual_page_count == 2


@pytest.mark.parametrize("page_size", [1, 2, 3, 5])
def test_break_count_agrees_with_ceiling_division(page_size: int) -> None:
    for count in range(0, 13):
        lines = tuple(f"l{n}" for n in range(count))
        layout = build_layout(Section(start_page=1, end_page=1, lines=lines), page_size)

        assert layout.is_consistent, (count, page_size)
