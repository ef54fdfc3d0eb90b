from __future__ import annotations

from collections.abc import Sequence

from ..models.config_models import DEFAULT_COLUMN_SIZE, DEFAULT_PAGE_SIZE
from ..models.page import BLANK_SLOT, Page, Slot
from ..models.record import RankedRecord

"""Paginator: ranked records -> fixed two-column print pages.

Every page gets a left and a right column of exactly ``column_size`` slots;
columns that run out of records are padded with BLANK_SLOT so the printed grid
never changes shape.
"""

__all__ = [
    "paginate",
]


def _pad(column: Sequence[RankedRecord], column_size: int) -> tuple[Slot, ...]:
    padding = max(0, column_size - len(column))
    return (*column, *([BLANK_SLOT] * padding))


def paginate(
    records: Sequence[RankedRecord],
    page_size: int = DEFAULT_PAGE_SIZE,
    column_size: int = DEFAULT_COLUMN_SIZE,
) -> list[Page]:
    """Split ranked records into pages of ``page_size``.

    Within a page the first ``column_size`` records form the left column and
    the rest the right column. No records yields no pages.

    Raises:
        ValueError: for non-positive sizes, or a page_size that does not fit
            into two columns (records would be lost).
    """
    if page_size < 1 or column_size < 1:
        raise ValueError(f"invalid layout: page_size={page_size} column_size={column_size}")
    if page_size > 2 * column_size:
        raise ValueError(f"page_size {page_size} exceeds two columns of {column_size}")

    pages: list[Page] = []
    for start in range(0, len(records), page_size):
        chunk = records[start:start + page_size]
        pages.append(
            Page(
                number=len(pages) + 1,
                left_column=_pad(chunk[:column_size], column_size),
                right_column=_pad(chunk[column_size:], column_size),
            )
        )
    return pages
