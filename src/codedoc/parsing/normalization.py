"""Whitespace normalization applied to stripped source text."""

from __future__ import annotations

import re

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def is_blank(line: str) -> bool:
    return not line.strip()


def remove_blank_lines(text: str) -> str:
    """Drop whitespace-only lines, right-trim the rest and cap newline runs at two."""

    kept = [line.rstrip() for line in text.split("\n") if not is_blank(line)]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(kept))
