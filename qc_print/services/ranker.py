from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Any, Protocol

from pyuca import Collator

from ..models.record import RankedRecord, Record

"""Ranker: global ordering and sequence numbering of extracted records.

Ordering is column C first, then column B, both ascending under the Unicode
Collation Algorithm (case and accents are weaker differences than the base
letter, so "apple" < "Banana" < "cherry" and "e" < "é" < "f"). The collator is
passed in explicitly; the process locale is never consulted. The sort is
stable, so records equal on both keys keep their sheet order.
"""

__all__ = [
    "SortKeyCollator",
    "default_collator",
    "sort_key",
    "rank",
]


class SortKeyCollator(Protocol):
    def sort_key(self, string: str) -> Any: ...


@lru_cache(maxsize=1)
def default_collator() -> Collator:
    """Shared root (DUCET) collator. Building it parses the key table once."""
    return Collator()


def sort_key(record: Record, collator: SortKeyCollator) -> tuple[Any, Any]:
    """Collation (column C, column B) key."""
    return (collator.sort_key(record.column_c), collator.sort_key(record.column_b))


def rank(records: Sequence[Record], collator: SortKeyCollator | None = None) -> list[RankedRecord]:
    """Sort records and number them 1..N in final order."""
    collator = collator or default_collator()
    ordered = sorted(records, key=lambda r: sort_key(r, collator))
    return [RankedRecord.from_record(r, i) for i, r in enumerate(ordered, start=1)]
