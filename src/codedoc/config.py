"""Explicit request configuration for one document generation."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Mapping

from codedoc.pagination.models import PageMode

DEFAULT_PAGE_SIZE = 50
DEFAULT_HEADER_TEXT = ""
DEFAULT_PAGE_MODE = PageMode.ALL


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_page_mode(*, name: str, raw_value: str) -> PageMode:
    try:
        return PageMode(raw_value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in PageMode)
        raise ValueError(f"{name} must be one of: {choices}") from exc


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Validated, serializable settings passed into the generation pipeline."""

    page_size: int = DEFAULT_PAGE_SIZE
    header_text: str = DEFAULT_HEADER_TEXT
    page_mode: PageMode = DEFAULT_PAGE_MODE
    custom_page_spec: str | None = None
    strip_comments: bool = True
    remove_blank_lines: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, int) or isinstance(self.page_size, bool) or self.page_size <= 0:
            raise ValueError("page_size must be a positive integer")
        if not isinstance(self.page_mode, PageMode):
            object.__setattr__(self, "page_mode", _parse_page_mode(name="page_mode", raw_value=str(self.page_mode)))
        if self.page_mode is PageMode.CUSTOM and not (self.custom_page_spec or "").strip():
            raise ValueError("custom_page_spec is required when page_mode is 'custom'")

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_size": self.page_size,
            "header_text": self.header_text,
            "page_mode": self.page_mode.value,
            "custom_page_spec": self.custom_page_spec,
            "strip_comments": self.strip_comments,
            "remove_blank_lines": self.remove_blank_lines,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "GenerationRequest":
        return cls(
            page_size=int(payload.get("page_size", DEFAULT_PAGE_SIZE)),
            header_text=str(payload.get("header_text", DEFAULT_HEADER_TEXT)),
            page_mode=_parse_page_mode(name="page_mode", raw_value=str(payload.get("page_mode", DEFAULT_PAGE_MODE.value))),
            custom_page_spec=payload.get("custom_page_spec"),
            strip_comments=bool(payload.get("strip_comments", True)),
            remove_blank_lines=bool(payload.get("remove_blank_lines", True)),
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        page_size: int | None = None,
        header_text: str | None = None,
        page_mode: PageMode | str | None = None,
        custom_page_spec: str | None = None,
        strip_comments: bool = True,
        remove_blank_lines: bool = True,
    ) -> "GenerationRequest":
        """Build a request from ``CODEDOC_*`` variables.

        Keyword values that are not None take precedence, and the environment
        variable they replace is never parsed.
        """

        source: Mapping[str, str] = os.environ if environ is None else environ

        if page_size is None:
            page_size_raw = source.get("CODEDOC_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)).strip()
            if not page_size_raw:
                raise ValueError("CODEDOC_PAGE_SIZE cannot be empty")
            page_size = _parse_positive_int(name="CODEDOC_PAGE_SIZE", raw_value=page_size_raw, minimum=1)

        if page_mode is None:
            page_mode_raw = source.get("CODEDOC_PAGE_MODE", DEFAULT_PAGE_MODE.value).strip()
            if not page_mode_raw:
                raise ValueError("CODEDOC_PAGE_MODE cannot be empty")
            page_mode = _parse_page_mode(name="CODEDOC_PAGE_MODE", raw_value=page_mode_raw)
        elif not isinstance(page_mode, PageMode):
            page_mode = _parse_page_mode(name="page_mode", raw_value=str(page_mode))

        if header_text is None:
            header_text = source.get("CODEDOC_HEADER_TEXT", DEFAULT_HEADER_TEXT)
        if custom_page_spec is None:
            custom_page_spec = source.get("CODEDOC_PAGE_RANGE", "").strip() or None

        if page_mode is PageMode.CUSTOM and custom_page_spec is None:
            raise ValueError("CODEDOC_PAGE_RANGE is required when CODEDOC_PAGE_MODE is 'custom'")

        return cls(
            page_size=page_size,
            header_text=header_text,
            page_mode=page_mode,
            custom_page_spec=custom_page_spec,
            strip_comments=strip_comments,
            remove_blank_lines=remove_blank_lines,
        )
