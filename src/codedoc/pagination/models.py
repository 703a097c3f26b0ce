"""Page, section and layout structures shared by pagination stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class PageMode(str, Enum):
    """Which pages of the distributed document end up in the output."""

    ALL = "all"
    CUSTOM = "custom"
    PARTIAL = "partial"


@dataclass(frozen=True, slots=True)
class Page:
    """One page of the distribution; ``end_index`` is exclusive."""

    number: int
    start_index: int
    end_index: int
    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PageDistribution:
    """Read-only partition of a line stream into fixed-size pages."""

    page_size: int
    pages: tuple[Page, ...] = ()

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def page(self, number: int) -> Page:
        if number < 1 or number > self.total_pages:
            raise IndexError(f"Page {number} outside 1..{self.total_pages}")
        return self.pages[number - 1]

    def lines_for(self, first: int, last: int) -> tuple[str, ...]:
        """Content lines of pages ``first..last`` inclusive."""
        collected: list[str] = []
        for number in range(first, last + 1):
            collected.extend(self.page(number).lines)
        return tuple(collected)


@dataclass(frozen=True, slots=True)
class Section:
    """Internally contiguous run of pages numbered from ``start_page``."""

    start_page: int
    end_page: int
    lines: tuple[str, ...]

    @property
    def page_count(self) -> int:
        return max(self.end_page - self.start_page + 1, 0)


@dataclass(frozen=True, slots=True)
class TextLine:
    text: str


@dataclass(frozen=True, slots=True)
class PageBreak:
    pass


LayoutUnit = Union[TextLine, PageBreak]


@dataclass(frozen=True, slots=True)
class SectionLayout:
    """Layout units for one section, ready for a document assembler."""

    start_page: int
    end_page: int
    units: tuple[LayoutUnit, ...]
    actual_page_count: int
    rendered_page_count: int

    @property
    def is_consistent(self) -> bool:
        return self.actual_page_count == self.rendered_page_count


@dataclass(slots=True)
class PaginatedDocument:
    """Everything a document assembler needs to render one request."""

    header_text: str
    total_pages: int
    sections: list[SectionLayout] = field(default_factory=list)

    @property
    def output_pages(self) -> int:
        return sum(section.actual_page_count for section in self.sections)
