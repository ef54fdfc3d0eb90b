from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Processing result models for a QC print run.

Aggregates per-file outcomes into the numbers reported on the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics (internal helper for ProcessingResult)."""
    file_name: str  # ファイル名
    status: str  # success/failed
    records: int  # ranked records (0 on failure)
    pages: int  # printable pages (0 on failure)
    elapsed_seconds: float  # ファイル処理時間


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of one run over one or more spreadsheets."""
    success_files: int  # 成功ファイル数
    failed_files: int  # 失敗ファイル数
    total_records: int  # records over all successful files
    total_pages: int  # pages over all successful files
    start_time: datetime  # 全体開始
    end_time: datetime  # 全体終了
    elapsed_seconds: float  # end - start
    file_stats: list[FileStat] | None = None  # ファイル詳細
