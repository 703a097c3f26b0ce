"""Comment style registry and extension-to-language mapping."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CommentStyle(str, Enum):
    """Closed set of comment-removal strategies keyed by language family."""

    C_STYLE = "c-style"
    PYTHON_STYLE = "python-style"
    MARKUP = "markup"
    CSS_STYLE = "css-style"
    SHELL_STYLE = "shell-style"
    SQL_STYLE = "sql-style"
    NONE = "none"

    @classmethod
    def from_tag(cls, tag: str | None) -> "CommentStyle":
        """Resolve a tag to a strategy, falling back to ``NONE`` for unknown tags."""
        if isinstance(tag, CommentStyle):
            return tag
        if not tag:
            return cls.NONE
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.NONE


_EXTENSION_LANGUAGES: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".pyw": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".cxx": "cpp",
    ".cc": "cpp",
    ".c": "c",
    ".cs": "csharp",
    ".php": "php",
    ".go": "go",
    ".rs": "rust",
    ".vue": "vue",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".scss": "scss",
    ".sass": "sass",
    ".json": "json",
    ".xml": "xml",
    ".sql": "sql",
    ".sh": "shell",
    ".bat": "batch",
    ".md": "markdown",
}

_LANGUAGE_STYLES: dict[str, CommentStyle] = {
    "javascript": CommentStyle.C_STYLE,
    "typescript": CommentStyle.C_STYLE,
    "java": CommentStyle.C_STYLE,
    "cpp": CommentStyle.C_STYLE,
    "c": CommentStyle.C_STYLE,
    "csharp": CommentStyle.C_STYLE,
    "go": CommentStyle.C_STYLE,
    "rust": CommentStyle.C_STYLE,
    "php": CommentStyle.C_STYLE,
    "python": CommentStyle.PYTHON_STYLE,
    "html": CommentStyle.MARKUP,
    "xml": CommentStyle.MARKUP,
    "css": CommentStyle.CSS_STYLE,
    "scss": CommentStyle.CSS_STYLE,
    "sass": CommentStyle.CSS_STYLE,
    "shell": CommentStyle.SHELL_STYLE,
    "sql": CommentStyle.SQL_STYLE,
}

SUPPORTED_EXTENSIONS = frozenset(_EXTENSION_LANGUAGES)


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def detect_language(path: Path) -> str:
    """Return the language name for *path*, or ``"text"`` when unknown."""
    return _EXTENSION_LANGUAGES.get(path.suffix.lower(), "text")


def comment_style_for_language(language: str) -> CommentStyle:
    return _LANGUAGE_STYLES.get(language, CommentStyle.NONE)


def comment_style_for_path(path: Path) -> CommentStyle:
    return comment_style_for_language(detect_language(path))
