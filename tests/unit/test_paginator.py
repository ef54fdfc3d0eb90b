from __future__ import annotations

import pytest

from qc_print.models.page import BLANK_SLOT, BlankSlot
from qc_print.models.record import RankedRecord
from qc_print.services.paginator import paginate


def _ranked(n: int) -> list[RankedRecord]:
    return [RankedRecord(sequence_number=i, column_b=f"b{i}", column_c=f"c{i}") for i in range(1, n + 1)]


def _real(column) -> list[RankedRecord]:
    return [s for s in column if isinstance(s, RankedRecord)]


def test_empty_input_yields_no_pages():
    assert paginate([]) == []


def test_example_single_short_page():
    records = _ranked(3)
    pages = paginate(records)
    assert len(pages) == 1
    page = pages[0]
    assert page.number == 1
    assert list(page.left_column[:3]) == records
    assert all(s is BLANK_SLOT for s in page.left_column[3:])
    assert len(page.left_column) == 50
    assert page.right_column == (BLANK_SLOT,) * 50


@pytest.mark.parametrize(
    "n, expected_pages",
    [(1, 1), (50, 1), (51, 1), (99, 1), (100, 1), (101, 2), (200, 2), (250, 3)],
)
def test_page_count(n: int, expected_pages: int):
    assert len(paginate(_ranked(n))) == expected_pages


def test_left_then_right_split():
    pages = paginate(_ranked(75))
    page = pages[0]
    assert [r.sequence_number for r in _real(page.left_column)] == list(range(1, 51))
    assert [r.sequence_number for r in _real(page.right_column)] == list(range(51, 76))
    assert page.right_column[25:] == (BLANK_SLOT,) * 25


def test_completeness_and_padding_invariant():
    records = _ranked(250)
    pages = paginate(records)
    flattened = [r for p in pages for r in p.records()]
    assert flattened == records
    for page in pages:
        for column in (page.left_column, page.right_column):
            assert len(column) == 50
            blanks = sum(1 for s in column if isinstance(s, BlankSlot))
            assert blanks == 50 - len(_real(column))
    # 3 ページ目: 左 50 件、右は全て空白
    assert len(_real(pages[2].left_column)) == 50
    assert len(_real(pages[2].right_column)) == 0


def test_last_page_with_single_record():
    pages = paginate(_ranked(101))
    last = pages[-1]
    assert last.number == 2
    assert last.record_count == 1
    assert last.blank_count == 99


def test_page_numbers_sequential():
    pages = paginate(_ranked(330))
    assert [p.number for p in pages] == [1, 2, 3, 4]


def test_custom_layout():
    pages = paginate(_ranked(12), page_size=10, column_size=5)
    assert len(pages) == 2
    assert len(pages[0].left_column) == 5
    assert len(pages[0].right_column) == 5
    assert [r.sequence_number for r in pages[1].records()] == [11, 12]
    assert len(pages[1].right_column) == 5


def test_page_size_smaller_than_two_columns():
    pages = paginate(_ranked(8), page_size=6, column_size=5)
    assert [p.record_count for p in pages] == [6, 2]
    # 右列は 1 件 + 空白 4
    assert len(_real(pages[0].right_column)) == 1
    assert len(pages[0].right_column) == 5


@pytest.mark.parametrize("page_size, column_size", [(0, 50), (100, 0), (101, 50), (-1, 5)])
def test_invalid_layout_rejected(page_size: int, column_size: int):
    with pytest.raises(ValueError):
        paginate(_ranked(3), page_size=page_size, column_size=column_size)


def test_paginate_is_deterministic():
    records = _ranked(123)
    assert paginate(records) == paginate(records)
