"""Turn a section's lines into text lines separated by page breaks."""

from __future__ import annotations

import math

from codedoc.parsing.normalization import is_blank
from codedoc.pagination.models import LayoutUnit, PageBreak, Section, SectionLayout, TextLine


def build_layout(section: Section, page_size: int) -> SectionLayout:
    """Emit layout units for *section*, breaking pages every ``page_size`` lines.

    ``rendered_page_count`` comes from the break-insertion loop and
    ``actual_page_count`` from ceiling division; they must agree.
    """

    if page_size <= 0:
        raise ValueError("page_size must be positive")

    units: list[LayoutUnit] = []
    on_page = 0
    content_lines = 0
    rendered_pages = 0

    for line in section.lines:
        if is_blank(line):
            continue

        if content_lines == 0:
            rendered_pages = 1
        elif on_page >= page_size:
            units.append(PageBreak())
            rendered_pages += 1
            on_page = 0

        units.append(TextLine(text=line))
        on_page += 1
        content_lines += 1

    return SectionLayout(
        start_page=section.start_page,
        end_page=section.end_page,
        units=tuple(units),
        actual_page_count=math.ceil(content_lines / page_size),
        rendered_page_count=rendered_pages,
    )
