"""Shared contract for document assemblers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from codedoc.pagination.models import PaginatedDocument


@runtime_checkable
class DocumentAssembler(Protocol):
    """Protocol that every output format renderer must implement."""

    def assemble(self, document: PaginatedDocument, output_path: Path) -> Path:
        """Render *document* to *output_path* and return the written path."""
