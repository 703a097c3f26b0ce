"""Concatenate stripped and normalized sources into one text stream."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging

from codedoc.parsing.normalization import remove_blank_lines
from codedoc.parsing.stripping import strip_comments
from codedoc.sources.models import SourceFailure, SourceUnit

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AggregationResult:
    """Joined content plus per-source bookkeeping for one generation request."""

    content: str = ""
    total_lines: int = 0
    processed_count: int = 0
    original_count: int = 0
    failures: list[SourceFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "total_lines": self.total_lines,
            "processed_files": self.processed_count,
            "original_files": self.original_count,
            "failures": [failure.to_dict() for failure in self.failures],
        }


def _process_unit(unit: SourceUnit, *, strip: bool, drop_blank_lines: bool) -> str:
    content = unit.raw_text
    if strip:
        content = strip_comments(content, unit.language_tag)
    if drop_blank_lines:
        content = remove_blank_lines(content)
    return content


def aggregate_sources(
    units: Sequence[SourceUnit],
    *,
    strip: bool = True,
    drop_blank_lines: bool = True,
) -> AggregationResult:
    """Strip, normalize and join sources in order with single line breaks."""

    result = AggregationResult(original_count=len(units))

    for unit in units:
        try:
            content = _process_unit(unit, strip=strip, drop_blank_lines=drop_blank_lines)
        except Exception as exc:
            logger.warning("Skipping source %s: %s", unit.path, exc)
            result.failures.append(SourceFailure(path=unit.path, error=str(exc)))
            continue

        if content.strip():
            if result.content:
                result.content = result.content.rstrip() + "\n" + content.strip()
            else:
                result.content = content.strip()
            result.total_lines += len(content.split("\n"))

        result.processed_count += 1

    return result
