"""Resolve a page selection mode into independently numbered sections."""

from __future__ import annotations

from collections.abc import Sequence
import re

from codedoc.errors import InvalidPageSpecError
from codedoc.pagination.models import PageDistribution, PageMode, Section

PARTIAL_EDGE_PAGES = 30

_SINGLE_RE = re.compile(r"^\s*(\d+)\s*$")
_RANGE_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def _check_bounds(token: str, number: int, total_pages: int) -> None:
    if number < 1 or number > total_pages:
        raise InvalidPageSpecError(token, f"page must be between 1 and {total_pages}")


def parse_page_spec(spec: str, total_pages: int) -> list[int]:
    """Parse ``"1,3,5-7"`` style selections into sorted, de-duplicated pages."""

    selected: set[int] = set()

    for raw_token in spec.split(","):
        token = raw_token.strip()
        if not token:
            raise InvalidPageSpecError(raw_token, "empty page token")

        range_match = _RANGE_RE.match(token)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            _check_bounds(token, start, total_pages)
            _check_bounds(token, end, total_pages)
            if start > end:
                raise InvalidPageSpecError(token, "range start is greater than range end")
            selected.update(range(start, end + 1))
            continue

        single_match = _SINGLE_RE.match(token)
        if not single_match:
            raise InvalidPageSpecError(token, "expected a page number or a range like 3-7")
        number = int(single_match.group(1))
        _check_bounds(token, number, total_pages)
        selected.add(number)

    return sorted(selected)


def group_contiguous_pages(pages: Sequence[int]) -> list[tuple[int, int]]:
    """Collapse sorted page numbers into inclusive ``(first, last)`` runs."""

    runs: list[tuple[int, int]] = []
    for number in pages:
        if runs and number == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], number)
        else:
            runs.append((number, number))
    return runs


def _section_for(distribution: PageDistribution, first: int, last: int) -> Section:
    return Section(start_page=first, end_page=last, lines=distribution.lines_for(first, last))


def _all_section(distribution: PageDistribution, lines: Sequence[str] | None) -> list[Section]:
    if lines is None:
        return [_section_for(distribution, 1, distribution.total_pages)]
    return [Section(start_page=1, end_page=distribution.total_pages, lines=tuple(lines))]


def select_sections(
    mode: PageMode | str,
    distribution: PageDistribution,
    custom_spec: str | None = None,
    *,
    lines: Sequence[str] | None = None,
) -> list[Section]:
    """Return the sections to lay out for *mode*.

    ``lines`` is the full stream the distribution was computed from; when given,
    ``all`` mode hands it over unchanged instead of re-joining page slices.
    """

    page_mode = PageMode(mode)
    total_pages = distribution.total_pages

    if page_mode is PageMode.CUSTOM:
        if not custom_spec or not custom_spec.strip():
            raise InvalidPageSpecError(custom_spec or "", "custom page mode requires a page range")
        pages = parse_page_spec(custom_spec, total_pages)
        return [_section_for(distribution, first, last) for first, last in group_contiguous_pages(pages)]

    if page_mode is PageMode.PARTIAL and total_pages > PARTIAL_EDGE_PAGES * 2:
        tail_start = total_pages - PARTIAL_EDGE_PAGES + 1
        return [
            _section_for(distribution, 1, PARTIAL_EDGE_PAGES),
            _section_for(distribution, tail_start, total_pages),
        ]

    return _all_section(distribution, lines)
