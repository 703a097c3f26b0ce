"""Comment stripping, whitespace normalization and source aggregation."""

from .aggregator import AggregationResult, aggregate_sources
from .normalization import is_blank, remove_blank_lines
from .stripping import strip_comments

__all__ = [
    "AggregationResult",
    "aggregate_sources",
    "is_blank",
    "remove_blank_lines",
    "strip_comments",
]
