"""Partition a line stream into fixed-size pages."""

from __future__ import annotations

from collections.abc import Sequence

from codedoc.parsing.normalization import is_blank
from codedoc.pagination.models import Page, PageDistribution


def distribute_pages(lines: Sequence[str], page_size: int) -> PageDistribution:
    """Assign non-blank lines to 1-based pages of ``page_size`` lines each.

    Blank lines never count toward page capacity and are not recorded in any
    page, but they stay inside the index range of the page they fall in. A page
    is only closed when another non-blank line arrives, so trailing blanks
    never open an empty page.
    """

    if page_size <= 0:
        raise ValueError("page_size must be positive")

    pages: list[Page] = []
    current: list[str] = []
    start_index = 0

    for index, line in enumerate(lines):
        if is_blank(line):
            continue

        if len(current) == page_size:
            pages.append(
                Page(number=len(pages) + 1, start_index=start_index, end_index=index, lines=tuple(current))
            )
            current = []
            start_index = index

        current.append(line)

    if current:
        pages.append(
            Page(number=len(pages) + 1, start_index=start_index, end_index=len(lines), lines=tuple(current))
        )

    return PageDistribution(page_size=page_size, pages=tuple(pages))
