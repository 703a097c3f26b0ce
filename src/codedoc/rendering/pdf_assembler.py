"""PDF assembler laying out text lines on fixed-height A4 pages."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import pymupdf

from codedoc.pagination.models import PageBreak, PaginatedDocument, SectionLayout, TextLine

logger = logging.getLogger(__name__)

_MARGIN = 54.0
_HEADER_FONT = "hebo"
_FOOTER_FONT = "helv"
_HEADER_FONTSIZE = 14.0
_FOOTER_FONTSIZE = 10.0
_MIN_BODY_FONTSIZE = 4.0
_MAX_BODY_FONTSIZE = 11.0
_TAB_SIZE = 4
_LATIN1_MAX = 0xFF


@dataclass(frozen=True, slots=True)
class _PageGeometry:
    width: float
    height: float
    line_height: float
    fontsize: float

    @property
    def body_top(self) -> float:
        return _MARGIN


def _has_non_latin1(text: str) -> bool:
    return any(ord(char) > _LATIN1_MAX for char in text)


def _needs_embedded_font(document: PaginatedDocument) -> bool:
    if _has_non_latin1(document.header_text):
        return True
    return any(
        isinstance(unit, TextLine) and _has_non_latin1(unit.text)
        for section in document.sections
        for unit in section.units
    )


def _split_pages(section: SectionLayout) -> list[list[str]]:
    pages: list[list[str]] = []
    current: list[str] = []
    for unit in section.units:
        if isinstance(unit, PageBreak):
            pages.append(current)
            current = []
        elif isinstance(unit, TextLine):
            current.append(unit.text)
    if current or pages:
        pages.append(current)
    return pages


class PDFAssembler:
    """Render paginated sections to PDF with header text and ``current/total`` footers."""

    def __init__(
        self,
        *,
        page_size: int,
        paper: str = "a4",
        fontname: str = "cour",
        fontfile: str | Path | None = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._page_size = page_size
        self._paper = paper
        self._fontfile = str(fontfile) if fontfile is not None else None
        self._fontname = "codefont" if self._fontfile else fontname
        self._header_fontname = self._fontname if self._fontfile else _HEADER_FONT
        self._footer_fontname = self._fontname if self._fontfile else _FOOTER_FONT

    def _geometry(self) -> _PageGeometry:
        rect = pymupdf.paper_rect(self._paper)
        usable = rect.height - 2 * _MARGIN
        line_height = usable / self._page_size
        # Never taller than the line pitch, or baselines overlap on dense pages.
        fontsize = min(max(line_height * 0.8, _MIN_BODY_FONTSIZE), _MAX_BODY_FONTSIZE, line_height)
        return _PageGeometry(width=rect.width, height=rect.height, line_height=line_height, fontsize=fontsize)

    def _font(self, fontname: str) -> pymupdf.Font:
        if self._fontfile:
            return pymupdf.Font(fontfile=self._fontfile)
        return pymupdf.Font(fontname=fontname)

    def _insert_centered(self, page: pymupdf.Page, text: str, *, y: float, fontname: str, fontsize: float) -> None:
        width = self._font(fontname).text_length(text, fontsize=fontsize)
        x = max((page.rect.width - width) / 2, _MARGIN)
        page.insert_text(
            (x, y),
            text,
            fontname=fontname,
            fontfile=self._fontfile,
            fontsize=fontsize,
        )

    def _render_page(
        self,
        doc: pymupdf.Document,
        geometry: _PageGeometry,
        lines: list[str],
        *,
        header_text: str,
        page_number: int,
        total_pages: int,
    ) -> None:
        page = doc.new_page(width=geometry.width, height=geometry.height)

        if header_text:
            self._insert_centered(
                page,
                header_text,
                y=_MARGIN - 18,
                fontname=self._header_fontname,
                fontsize=_HEADER_FONTSIZE,
            )

        for offset, text in enumerate(lines):
            baseline = geometry.body_top + geometry.line_height * offset + geometry.fontsize
            page.insert_text(
                (_MARGIN, baseline),
                text.expandtabs(_TAB_SIZE),
                fontname=self._fontname,
                fontfile=self._fontfile,
                fontsize=geometry.fontsize,
            )

        self._insert_centered(
            page,
            f"{page_number}/{total_pages}",
            y=geometry.height - _MARGIN / 2,
            fontname=self._footer_fontname,
            fontsize=_FOOTER_FONTSIZE,
        )

    def assemble(self, document: PaginatedDocument, output_path: Path) -> Path:
        target = Path(output_path)
        geometry = self._geometry()
        rendered = 0

        if self._fontfile is None and _needs_embedded_font(document):
            logger.warning(
                "Text outside Latin-1 will not render with base-14 font %s; pass a font file",
                self._fontname,
            )

        with pymupdf.open() as doc:
            for section in document.sections:
                for offset, lines in enumerate(_split_pages(section)):
                    self._render_page(
                        doc,
                        geometry,
                        lines,
                        header_text=document.header_text,
                        page_number=section.start_page + offset,
                        total_pages=document.total_pages,
                    )
                    rendered += 1

            if rendered == 0:
                raise ValueError("Document has no pages to render")

            doc.set_metadata({"title": document.header_text or target.stem, "creator": "codedoc"})
            target.parent.mkdir(parents=True, exist_ok=True)
            doc.save(str(target))

        logger.info("Wrote %d pages to %s", rendered, target)
        return target
