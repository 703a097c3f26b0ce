"""Page distribution, page range selection and layout building."""

from .distribution import distribute_pages
from .layout import build_layout
from .models import (
    LayoutUnit,
    Page,
    PageBreak,
    PageDistribution,
    PageMode,
    PaginatedDocument,
    Section,
    SectionLayout,
    TextLine,
)
from .selection import PARTIAL_EDGE_PAGES, group_contiguous_pages, parse_page_spec, select_sections

__all__ = [
    "LayoutUnit",
    "PARTIAL_EDGE_PAGES",
    "Page",
    "PageBreak",
    "PageDistribution",
    "PageMode",
    "PaginatedDocument",
    "Section",
    "SectionLayout",
    "TextLine",
    "build_layout",
    "distribute_pages",
    "group_contiguous_pages",
    "parse_page_spec",
    "select_sections",
]
