from __future__ import annotations

from dataclasses import dataclass

"""Record models for the QC print pipeline.

A Record is the trimmed (column B, column C) pair of one data row. A
RankedRecord is the same pair after global sorting, carrying its 1-based
sequence number.
"""

__all__ = [
    "Record",
    "RankedRecord",
]


@dataclass(frozen=True)
class Record:
    """Trimmed column B / column C text of one data row.

    Both fields are plain strings; the empty string stands for a blank cell.
    """
    column_b: str
    column_c: str


@dataclass(frozen=True)
class RankedRecord:
    """Record with its final position in the sorted output."""
    sequence_number: int  # 1..N, contiguous
    column_b: str
    column_c: str

    @classmethod
    def from_record(cls, record: Record, sequence_number: int) -> RankedRecord:
        return cls(
            sequence_number=sequence_number,
            column_b=record.column_b,
            column_c=record.column_c,
        )
