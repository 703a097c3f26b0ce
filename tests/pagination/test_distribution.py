from __future__ import annotations

import pytest

from codedoc.pagination.distribution import distribute_pages


def test_blank_lines_do_not_count_toward_page_capacity() -> None:
    distribution = distribute_pages(["line1", "", "line2", "line3"], 2)

    assert distribution.total_pages == 2
    first, second = distribution.pages
    assert (first.number, first.start_index, first.end_index, first.lines) == (1, 0, 3, ("line1", "line2"))
    assert (second.number, second.start_index, second.end_index, second.lines) == (2, 3, 4, ("line3",))


def test_zero_content_lines_produce_zero_pages() -> None:
    distribution = distribute_pages(["", "   ", "\t"], 5)

    assert distribution.total_pages == 0
    assert distribution.pages == ()


def test_trailing_blanks_after_full_page_do_not_open_a_new_page() -> None:
    distribution = distribute_pages(["a", "b", "", " "], 2)

    assert distribution.total_pages == 1
    assert distribution.pages[0].end_index == 4


def test_final_partial_page_is_closed() -> None:
    distribution = distribute_pages([f"l{n}" for n in range(7)], 3)

    assert [len(page.lines) for page in distribution.pages] == [3, 3, 1]
    assert [page.number for page in distribution.pages] == [1, 2, 3]


def test_page_count_is_monotonic_in_page_size() -> None:
    lines = [f"row {n}" if n % 4 else "" for n in range(40)]
    counts = [distribute_pages(lines, size).total_pages for size in range(1, 12)]

    assert counts == sorted(counts, reverse=True)


def test_lookup_helpers_return_page_slices() -> None:
    distribution = distribute_pages([f"l{n}" for n in range(6)], 2)

    assert distribution.page(2).lines == ("l2", "l3")
    assert distribution.lines_for(2, 3) == ("l2", "l3", "l4", "l5")
    with pytest.raises(IndexError):
        distribution.page(4)


def test_page_size_must_be_positive() -> None:
    with pytest.raises(ValueError, match="page_size"):
        distribute_pages(["a"], 0)
