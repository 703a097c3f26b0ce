"""Document assemblers consuming paginated layouts."""

from .base import DocumentAssembler
from .pdf_assembler import PDFAssembler

__all__ = ["DocumentAssembler", "PDFAssembler"]
