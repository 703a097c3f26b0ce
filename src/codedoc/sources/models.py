"""Canonical data structures for source files entering the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One input file with the comment style tag used to strip it."""

    path: str
    language_tag: str
    raw_text: str


@dataclass(frozen=True, slots=True)
class SourceFailure:
    """A source that was skipped, with the reason it could not be used."""

    path: str
    error: str

    def to_dict(self) -> dict[str, str]:
        return {"source_path": self.path, "error": self.error}


@dataclass(slots=True)
class ScanResult:
    """Sources collected from the requested paths plus any skipped files."""

    units: list[SourceUnit] = field(default_factory=list)
    failures: list[SourceFailure] = field(default_factory=list)
