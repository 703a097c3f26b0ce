"""Source file discovery and decoding for document generation."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path
import re

from charset_normalizer import from_bytes

from codedoc.errors import UnreadableSourceError
from codedoc.sources.languages import comment_style_for_path, is_supported
from codedoc.sources.models import ScanResult, SourceFailure, SourceUnit

logger = logging.getLogger(__name__)

_UTF8_NAMES = {"utf_8", "utf-8", "utf8"}

_SKIP_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"^\.",
        r"^node_modules$",
        r"^vendor$",
        r"^__pycache__$",
        r"^build$",
        r"^dist$",
        r"^target$",
        r"^bin$",
        r"^obj$",
        r"^coverage$",
        r"~$",
        r"\.tmp$",
        r"\.temp$",
        r"\.log$",
    )
)


def should_skip(name: str) -> bool:
    """Return True for hidden, dependency, build and temporary entries."""
    return any(pattern.search(name) for pattern in _SKIP_PATTERNS)


def _decode(raw: bytes) -> str:
    best = from_bytes(raw).best()
    if best and best.encoding:
        name = best.encoding.lower()
        if name in {"windows-1251", "cp1251"}:
            return raw.decode("cp1251")
        if name in _UTF8_NAMES:
            return raw.decode("utf-8-sig")
        return raw.decode(best.encoding)

    for fallback in ("utf-8-sig", "cp1251"):
        try:
            return raw.decode(fallback)
        except UnicodeDecodeError:
            continue
    raise ValueError("Could not detect source encoding")


def read_source(path: str | Path) -> SourceUnit:
    """Read one file and tag it with the comment style of its extension."""

    source = Path(path)
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise UnreadableSourceError(str(source), f"Failed to read source file: {exc}") from exc

    if not raw:
        text = ""
    else:
        try:
            text = _decode(raw)
        except (ValueError, LookupError) as exc:
            raise UnreadableSourceError(str(source), f"Failed to decode source file: {exc}") from exc

    return SourceUnit(
        path=str(source),
        language_tag=comment_style_for_path(source).value,
        raw_text=text,
    )


def _walk(directory: Path, failures: list[SourceFailure]) -> list[Path]:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        failures.append(SourceFailure(path=str(directory), error=f"Failed to read directory: {exc}"))
        return []

    found: list[Path] = []
    for entry in entries:
        if should_skip(entry.name):
            continue
        if entry.is_dir():
            found.extend(_walk(entry, failures))
        elif entry.is_file() and is_supported(entry):
            found.append(entry)
    return found


def _collect_inputs(target: Path, failures: list[SourceFailure]) -> list[Path]:
    if target.is_file():
        return [target] if is_supported(target) else []
    if target.is_dir():
        return _walk(target, failures)
    return []


def collect_sources(paths: Iterable[str | Path]) -> ScanResult:
    """Collect supported source files from files and directories, sorted by path."""

    result = ScanResult()
    seen: set[Path] = set()
    candidates: list[Path] = []

    for raw_path in paths:
        target = Path(raw_path)
        if not target.exists():
            logger.warning("Skipping missing path: %s", target)
            result.failures.append(SourceFailure(path=str(target), error="Path does not exist"))
            continue
        for file_path in _collect_inputs(target, result.failures):
            resolved = file_path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            candidates.append(file_path)

    for file_path in sorted(candidates, key=lambda item: str(item)):
        try:
            result.units.append(read_source(file_path))
        except UnreadableSourceError as exc:
            logger.warning("Skipping unreadable source %s: %s", exc.path, exc.message)
            result.failures.append(SourceFailure(path=exc.path, error=exc.message))

    return result
