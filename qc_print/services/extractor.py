from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, datetime, time
from typing import Any

import numpy as np
import pandas as pd

from ..models.record import Record

"""Row extractor: raw sheet rows -> trimmed column B / column C records.

Row 0 is always the header and is skipped without inspection. Short rows and
non-text cells never fail; they degrade to empty or textual values.
"""

__all__ = [
    "COLUMN_B_INDEX",
    "COLUMN_C_INDEX",
    "cell_text",
    "extract",
]

COLUMN_B_INDEX = 1
COLUMN_C_INDEX = 2


def cell_text(value: Any) -> str:
    """Coerce one decoded cell to trimmed text.

    Blank cells (None, NaN, NaT) become "". Booleans use the spreadsheet's
    TRUE/FALSE spelling and integral floats lose their ".0", since the decoder
    widens integer columns containing blanks to float.
    """
    if value is None:
        return ""
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    elif isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, str):
        return value.strip()
    if value is pd.NaT:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value).strip()


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row):
        return ""
    return cell_text(row[index])


def extract(rows: Sequence[Sequence[Any]]) -> list[Record]:
    """Extract records from raw rows, dropping the header and blank rows.

    A row is kept when column B or column C is non-empty after trimming.
    """
    records: list[Record] = []
    for row in rows[1:]:
        if row is None:
            continue
        column_b = _cell(row, COLUMN_B_INDEX)
        column_c = _cell(row, COLUMN_C_INDEX)
        if column_b or column_c:
            records.append(Record(column_b=column_b, column_c=column_c))
    return records
