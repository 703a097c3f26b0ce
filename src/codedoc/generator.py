"""Orchestrates aggregation, pagination and document assembly for one request."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path

from codedoc.config import GenerationRequest
from codedoc.errors import EmptyInputError, GenerationError
from codedoc.pagination.distribution import distribute_pages
from codedoc.pagination.layout import build_layout
from codedoc.pagination.models import PaginatedDocument
from codedoc.pagination.selection import select_sections
from codedoc.parsing.aggregator import AggregationResult, aggregate_sources
from codedoc.rendering.base import DocumentAssembler
from codedoc.sources.models import SourceFailure, SourceUnit

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationReport:
    """Summary of a completed generation request."""

    output_path: str
    total_pages: int
    output_pages: int
    sections: list[tuple[int, int]]
    processed_files: int
    original_files: int
    total_lines: int
    failures: list[SourceFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "output_path": self.output_path,
            "total_pages": self.total_pages,
            "output_pages": self.output_pages,
            "sections": [{"start_page": start, "end_page": end} for start, end in self.sections],
            "processed_files": self.processed_files,
            "original_files": self.original_files,
            "total_lines": self.total_lines,
            "failures": [failure.to_dict() for failure in self.failures],
        }


def paginate(content: str, request: GenerationRequest) -> PaginatedDocument:
    """Lay out already aggregated *content* according to *request*."""

    lines = content.split("\n")
    distribution = distribute_pages(lines, request.page_size)
    if distribution.total_pages == 0:
        raise EmptyInputError("No content lines left to paginate")

    sections = select_sections(
        request.page_mode,
        distribution,
        request.custom_page_spec,
        lines=lines,
    )

    layouts = []
    for section in sections:
        layout = build_layout(section, request.page_size)
        if not layout.is_consistent:
            logger.warning(
                "Page count mismatch for section %d-%d: %d by division, %d by page breaks",
                section.start_page,
                section.end_page,
                layout.actual_page_count,
                layout.rendered_page_count,
            )
        layouts.append(layout)

    return PaginatedDocument(
        header_text=request.header_text,
        total_pages=distribution.total_pages,
        sections=layouts,
    )


def aggregate_request(units: Sequence[SourceUnit], request: GenerationRequest) -> AggregationResult:
    if not units:
        raise EmptyInputError("No source files to process")

    aggregated = aggregate_sources(
        units,
        strip=request.strip_comments,
        drop_blank_lines=request.remove_blank_lines,
    )
    if not aggregated.content.strip():
        raise EmptyInputError("All source files are empty after comment and blank line removal")
    return aggregated


def generate_document(
    units: Sequence[SourceUnit],
    request: GenerationRequest,
    assembler: DocumentAssembler,
    output_path: str | Path,
) -> GenerationReport:
    """Run the full pipeline and write the document through *assembler*."""

    aggregated = aggregate_request(units, request)
    logger.info(
        "Aggregated %d/%d sources into %d lines",
        aggregated.processed_count,
        aggregated.original_count,
        aggregated.total_lines,
    )

    document = paginate(aggregated.content, request)
    logger.info(
        "Paginated %d pages, %d selected in %d section(s)",
        document.total_pages,
        document.output_pages,
        len(document.sections),
    )

    try:
        written = assembler.assemble(document, Path(output_path))
    except (OSError, RuntimeError, ValueError) as exc:
        raise GenerationError(stage="render", message=f"Document assembly failed: {exc}") from exc

    return GenerationReport(
        output_path=str(written),
        total_pages=document.total_pages,
        output_pages=document.output_pages,
        sections=[(section.start_page, section.end_page) for section in document.sections],
        processed_files=aggregated.processed_count,
        original_files=aggregated.original_count,
        total_lines=aggregated.total_lines,
        failures=list(aggregated.failures),
    )
