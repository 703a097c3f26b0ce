from __future__ import annotations

import logging

from codedoc.parsing.aggregator import aggregate_sources
from codedoc.sources.models import SourceUnit


def _unit(path: str, text: str, tag: str = "python-style") -> SourceUnit:
    return SourceUnit(path=path, language_tag=tag, raw_text=text)


def test_sources_are_joined_with_single_line_break() -> None:
    result = aggregate_sources([_unit("a.py", "x = 1\n\n"), _unit("b.py", "\n\ny = 2\n")])

    assert result.content == "x = 1\ny = 2"
    assert "" not in result.content.split("\n")


def test_comments_are_stripped_per_source_language() -> None:
    result = aggregate_sources(
        [
            _unit("a.py", "# header\nvalue = 'a # b'  # note\n"),
            _unit("b.js", "// header\nconst c = 3; /* tail */\n", tag="c-style"),
        ]
    )

    assert result.content == "value = 'a # b'\nconst c = 3;"


def test_counts_track_processed_sources_and_post_strip_lines() -> None:
    result = aggregate_sources(
        [
            _unit("a.txt", "a\nb", tag="none"),
            _unit("only_comments.py", "# nothing here\n# still nothing\n"),
            _unit("c.txt", "c", tag="none"),
        ]
    )

    assert result.content == "a\nb\nc"
    assert result.total_lines == 3
    assert result.processed_count == 3
    assert result.original_count == 3
    assert result.failures == []


def test_failing_source_is_logged_and_skipped(caplog: object) -> None:
    broken = SourceUnit(path="broken.py", language_tag="python-style", raw_text=None)  # type: ignore[arg-type]

    with caplog.at_level(logging.WARNING):
        result = aggregate_sources([_unit("a.py", "a = 1"), broken, _unit("b.py", "b = 2")])

    assert result.content == "a = 1\nb = 2"
    assert result.processed_count == 2
    assert result.original_count == 3
    assert [failure.path for failure in result.failures] == ["broken.py"]
    assert "Skipping source broken.py" in caplog.text


def test_switches_keep_comments_and_blank_lines_when_disabled() -> None:
    result = aggregate_sources(
        [_unit("a.py", "# keep\n\nx = 1")],
        strip=False,
        drop_blank_lines=False,
    )

    assert result.content == "# keep\n\nx = 1"
    assert result.total_lines == 3


def test_empty_batch_yields_empty_content() -> None:
    result = aggregate_sources([])

    assert result.content == ""
    assert result.total_lines == 0
    assert result.processed_count == 0
