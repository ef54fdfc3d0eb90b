from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Any, Union

import pandas as pd

"""Spreadsheet decoder boundary.

The decoder itself is pandas (openpyxl for .xlsx, xlrd for .xls). This module
reads the first sheet as raw rows of cells and turns every decoder failure
into a single DecodeFailure. Only the first sheet is ever read.
"""

Source = Union[str, Path, bytes, IO[bytes]]


class DecodeFailure(Exception):
    """Raised when the supplied file cannot be decoded as a spreadsheet."""


def _as_excel_input(source: Source) -> str | Path | IO[bytes]:
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    return source


def read_rows(source: Source, keep_default_na: bool = False) -> list[list[Any]]:
    """Read the first sheet of a workbook as a list of raw rows.

    Parameters
    ----------
    source: ファイルパス、またはファイル内容 (bytes / バイナリストリーム)
    keep_default_na: True なら pandas 既定の NA 文字列 ("NA", "null" 等) も空扱い。
        既定 False: セルの文字列はそのまま残す

    Row 0 is whatever the sheet's first row holds; no header detection happens
    here. Empty cells come back as None.
    """
    try:
        # ヘッダなしで生読み (ヘッダ行の扱いは extractor 側)
        with pd.ExcelFile(_as_excel_input(source)) as xls:
            if not xls.sheet_names:
                raise DecodeFailure("workbook contains no sheets")
            df = xls.parse(
                xls.sheet_names[0],
                header=None,
                keep_default_na=keep_default_na,
                na_values=None if keep_default_na else [""],
            )
    except DecodeFailure:
        raise
    except Exception as e:
        raise DecodeFailure(f"cannot read spreadsheet: {e}") from e

    rows: list[list[Any]] = []
    for raw in df.itertuples(index=False, name=None):
        rows.append([None if _is_missing(val) else val for val in raw])
    return rows


def _is_missing(val: Any) -> bool:
    # pd.isna は list 等にも反応するためスカラのみ判定
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False
