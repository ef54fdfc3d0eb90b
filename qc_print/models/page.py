from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from .record import RankedRecord

"""Page layout models.

A Page is the printable unit: a left and a right column, each holding exactly
``column_size`` slots. Slots past the last real record are BlankSlot
placeholders so every printed grid has the same shape.
"""

__all__ = [
    "BlankSlot",
    "BLANK_SLOT",
    "Slot",
    "Page",
]


@dataclass(frozen=True)
class BlankSlot:
    """Placeholder row without data. Renders as empty cells."""


BLANK_SLOT = BlankSlot()

Slot = Union[RankedRecord, BlankSlot]


@dataclass(frozen=True)
class Page:
    """One printable page (two fixed-height columns)."""
    number: int  # 1-based page number
    left_column: tuple[Slot, ...]
    right_column: tuple[Slot, ...]

    def records(self) -> Iterator[RankedRecord]:
        """Yield the real records of the page, left column first."""
        for slot in (*self.left_column, *self.right_column):
            if isinstance(slot, RankedRecord):
                yield slot

    @property
    def record_count(self) -> int:
        return sum(1 for _ in self.records())

    @property
    def blank_count(self) -> int:
        return len(self.left_column) + len(self.right_column) - self.record_count
