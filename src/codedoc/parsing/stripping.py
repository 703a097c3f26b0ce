"""Comment removal strategies keyed by language family.

Every strategy is best-effort and never raises on malformed input. Only the
Python strategy tracks string literals; the regex strategies treat comment
delimiters inside literals as real comments.
"""

from __future__ import annotations

from collections.abc import Callable
import re

from codedoc.sources.languages import CommentStyle

_LINE_SLASH_RE = re.compile(r"//.*$", re.MULTILINE)
_LINE_DASH_RE = re.compile(r"--.*$", re.MULTILINE)
_LINE_HASH_RE = re.compile(r"^#.*$", re.MULTILINE)
_BLOCK_RE = re.compile(r"/\*[\s\S]*?\*/")
_MARKUP_RE = re.compile(r"<!--[\s\S]*?-->")

_TRIPLE_QUOTES = ('"""', "'''")


def strip_c_style(text: str) -> str:
    text = _LINE_SLASH_RE.sub("", text)
    return _BLOCK_RE.sub("", text)


def strip_python_style(text: str) -> str:
    """Drop ``#`` comments while copying string literals through untouched.

    Triple-quoted strings may span lines, so their state is carried from one
    line to the next. Single-quoted strings end at the matching unescaped
    quote or at the end of the line, whichever comes first.
    """
    result: list[str] = []
    in_multiline = False
    delimiter = ""

    for line in text.split("\n"):
        kept: list[str] = []
        index = 0
        length = len(line)

        while index < length:
            char = line[index]
            window = line[index : index + 3]

            if in_multiline:
                if window == delimiter:
                    kept.append(window)
                    index += 3
                    in_multiline = False
                    delimiter = ""
                    continue
                kept.append(char)
                index += 1
                continue

            if window in _TRIPLE_QUOTES:
                in_multiline = True
                delimiter = window
                kept.append(window)
                index += 3
                continue

            if char == "#":
                break

            if char in ("'", '"'):
                quote = char
                kept.append(char)
                index += 1
                while index < length and line[index] != quote:
                    if line[index] == "\\":
                        kept.append(line[index : index + 2])
                        index += 2
                        continue
                    kept.append(line[index])
                    index += 1
                if index < length:
                    kept.append(line[index])
                    index += 1
                continue

            kept.append(char)
            index += 1

        result.append("".join(kept))

    return "\n".join(result)


def strip_markup(text: str) -> str:
    return _MARKUP_RE.sub("", text)


def strip_css_style(text: str) -> str:
    return _BLOCK_RE.sub("", text)


def strip_shell_style(text: str) -> str:
    return _LINE_HASH_RE.sub("", text)


def strip_sql_style(text: str) -> str:
    text = _LINE_DASH_RE.sub("", text)
    return _BLOCK_RE.sub("", text)


def _unchanged(text: str) -> str:
    return text


_STRATEGIES: dict[CommentStyle, Callable[[str], str]] = {
    CommentStyle.C_STYLE: strip_c_style,
    CommentStyle.PYTHON_STYLE: strip_python_style,
    CommentStyle.MARKUP: strip_markup,
    CommentStyle.CSS_STYLE: strip_css_style,
    CommentStyle.SHELL_STYLE: strip_shell_style,
    CommentStyle.SQL_STYLE: strip_sql_style,
    CommentStyle.NONE: _unchanged,
}


def strip_comments(text: str, language_tag: CommentStyle | str | None) -> str:
    """Remove comments from *text* using the strategy registered for *language_tag*."""

    style = CommentStyle.from_tag(language_tag)
    return _STRATEGIES[style](text)
