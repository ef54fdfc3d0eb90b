from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from qc_print.models import (
    BLANK_SLOT,
    JobStatus,
    LayoutConfig,
    Page,
    PrintConfig,
    PrintJob,
    RankedRecord,
    Record,
)
from qc_print.models.processing_result import FileStat, ProcessingResult


def test_record_is_frozen():
    r = Record(column_b="b", column_c="c")
    with pytest.raises(AttributeError):
        r.column_b = "x"  # type: ignore[misc]


def test_ranked_record_from_record():
    ranked = RankedRecord.from_record(Record(column_b="b", column_c="c"), 7)
    assert ranked == RankedRecord(sequence_number=7, column_b="b", column_c="c")


def test_page_helpers():
    r1 = RankedRecord(sequence_number=1, column_b="a", column_c="x")
    r2 = RankedRecord(sequence_number=2, column_b="b", column_c="y")
    page = Page(number=1, left_column=(r1, BLANK_SLOT), right_column=(r2, BLANK_SLOT))
    assert list(page.records()) == [r1, r2]
    assert page.record_count == 2
    assert page.blank_count == 2


def test_layout_defaults():
    layout = LayoutConfig()
    assert layout.page_size == 100
    assert layout.column_size == 50


@pytest.mark.parametrize("kwargs", [{"page_size": 0}, {"column_size": 0}, {"page_size": 120}])
def test_layout_validation(kwargs):
    with pytest.raises(ValueError):
        LayoutConfig(**kwargs)


def test_print_config_defaults():
    cfg = PrintConfig(source_directory="./data")
    assert cfg.output_directory == "./output"
    assert cfg.title == "QC Print"
    assert cfg.layout == LayoutConfig()


def test_job_status_values():
    assert {s.value for s in JobStatus} == {"pending", "processing", "success", "failed"}


def test_print_job_defaults():
    job = PrintJob(path=Path("/tmp/a.xlsx"), name="a.xlsx")
    assert job.status == JobStatus.PENDING
    assert job.pages == []
    assert job.page_count == 0
    assert job.record_count == 0
    assert job.output_path is None
    assert job.error is None


def test_processing_result_fields():
    start = datetime(2025, 1, 1, 10, 0, 0, tzinfo=UTC)
    end = datetime(2025, 1, 1, 10, 0, 1, tzinfo=UTC)
    stat = FileStat(file_name="a.xlsx", status="success", records=3, pages=1, elapsed_seconds=0.5)
    result = ProcessingResult(
        success_files=1, failed_files=0, total_records=3, total_pages=1,
        start_time=start, end_time=end, elapsed_seconds=1.0, file_stats=[stat],
    )
    assert result.file_stats == [stat]
    with pytest.raises(AttributeError):
        result.success_files = 2  # type: ignore[misc]
