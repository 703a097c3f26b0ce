from __future__ import annotations

from codedoc.parsing.normalization import is_blank, remove_blank_lines


def test_blank_and_whitespace_only_lines_are_dropped() -> None:
    assert remove_blank_lines("a  \n\n   \n\tb\t\n\n") == "a\n\tb"


def test_surviving_lines_are_right_trimmed_only() -> None:
    assert remove_blank_lines("    indented   \r\nnext") == "    indented\nnext"


def test_output_never_contains_blank_lines() -> None:
    result = remove_blank_lines("x\n\n\n\n\ny\n \n\t\nz")

    assert result == "x\ny\nz"
    assert all(not is_blank(line) for line in result.split("\n"))


def test_empty_input_stays_empty() -> None:
    assert remove_blank_lines("") == ""
    assert remove_blank_lines("\n \n\t") == ""
