"""Source discovery, language tagging and canonical source models."""

from .languages import CommentStyle, SUPPORTED_EXTENSIONS, comment_style_for_path, detect_language
from .models import ScanResult, SourceFailure, SourceUnit
from .scanner import collect_sources, read_source, should_skip

__all__ = [
    "CommentStyle",
    "SUPPORTED_EXTENSIONS",
    "ScanResult",
    "SourceFailure",
    "SourceUnit",
    "collect_sources",
    "comment_style_for_path",
    "detect_language",
    "read_source",
    "should_skip",
]
