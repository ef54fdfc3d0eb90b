from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from ..excel.reader import DecodeFailure, Source, read_rows
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import LayoutConfig, PrintConfig
from ..models.page import Page
from ..models.print_job import JobStatus, PrintJob
from ..models.processing_result import FileStat, ProcessingResult
from ..render.html import write_print_html
from .extractor import extract
from .paginator import paginate
from .progress import ProgressTracker
from .ranker import SortKeyCollator, rank

logger = logging.getLogger(__name__)

"""Pipeline coordination for the QC print generator.

``process`` runs decode -> extract -> rank -> paginate for one spreadsheet.
``process_file`` and ``process_all`` are the batch layer used by the CLI:
one failing file is reported and skipped, the others still get printed.
"""

EXCEL_SUFFIXES = (".xlsx", ".xls")


class ProcessingError(Exception):
    """Fatal error that prevents a run from starting."""
    pass


def process(
    source: Source,
    layout: LayoutConfig | None = None,
    collator: SortKeyCollator | None = None,
) -> list[Page]:
    """Turn one spreadsheet into print pages.

    Args:
        source: Path to the workbook, or its raw bytes / binary stream
        layout: Page geometry (defaults to 100 records, 2 x 50 rows)
        collator: Collator for the (C, B) ordering (defaults to the root
            Unicode collator)

    Returns:
        Pages in print order; empty when the sheet has no data rows

    Raises:
        DecodeFailure: the source is not a readable spreadsheet. Nothing
            else is raised and no partial result exists in that case.
    """
    layout = layout or LayoutConfig()
    rows = read_rows(source)
    records = extract(rows)
    ranked = rank(records, collator)
    logger.debug(f"rows={len(rows)} records={len(records)}")
    return paginate(ranked, page_size=layout.page_size, column_size=layout.column_size)


def scan_excel_files(directory: Path) -> list[Path]:
    """Scan directory for .xlsx/.xls files (non-recursive), sorted by name.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in EXCEL_SUFFIXES),
            key=lambda p: p.name,
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def process_file(
    file_path: Path,
    layout: LayoutConfig,
    error_log: ErrorLogBuffer,
    output_directory: Path | None = None,
    title: str = "QC Print",
    collator: SortKeyCollator | None = None,
) -> PrintJob:
    """Process a single spreadsheet and optionally write its print HTML.

    A decode failure is logged once, recorded in ``error_log`` and returned
    as a failed PrintJob; it is never raised.
    """
    start_time = datetime.now(UTC)
    try:
        pages = process(file_path, layout, collator)
    except DecodeFailure as e:
        logger.error(f"{file_path.name}: {e}")
        error_log.append(ErrorRecord.create(file=file_path.name, error_type="DECODE_ERROR", message=str(e)))
        return PrintJob(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=JobStatus.FAILED,
            error=str(e),
        )

    output_path = None
    if output_directory is not None:
        try:
            output_path = write_print_html(pages, output_directory / f"{file_path.stem}.html", title)
        except OSError as e:
            logger.error(f"{file_path.name}: cannot write print file: {e}")
            error_log.append(ErrorRecord.create(file=file_path.name, error_type="OUTPUT_ERROR", message=str(e)))
            return PrintJob(
                path=file_path,
                name=file_path.name,
                start_time=start_time,
                end_time=datetime.now(UTC),
                status=JobStatus.FAILED,
                error=str(e),
            )
        logger.info(f"{file_path.name}: wrote {output_path}")

    record_count = sum(p.record_count for p in pages)
    logger.info(f"{file_path.name}: records={record_count} pages={len(pages)}")
    return PrintJob(
        path=file_path,
        name=file_path.name,
        pages=pages,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=JobStatus.SUCCESS,
        record_count=record_count,
        output_path=output_path,
    )


def process_all(
    config: PrintConfig,
    paths: Iterable[Path] | None = None,
    write_output: bool = True,
    collator: SortKeyCollator | None = None,
) -> ProcessingResult:
    """Process the given spreadsheets, or every spreadsheet in the source directory.

    Args:
        config: Print configuration (layout, directories, title)
        paths: Explicit files to process; None scans ``config.source_directory``
        write_output: Write ``<output_directory>/<stem>.html`` per successful file
        collator: Collator shared by every file of the run; None uses the
            root Unicode collator

    Returns:
        ProcessingResult with aggregated counts and per-file stats

    Raises:
        ProcessingError: source directory missing when no paths are given
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer()

    if paths is None:
        file_paths = scan_excel_files(Path(config.source_directory))
    else:
        file_paths = list(paths)

    output_directory = Path(config.output_directory) if write_output else None

    file_stats: list[FileStat] = []
    success_count = 0
    failed_count = 0
    total_records = 0
    total_pages = 0

    with ProgressTracker(len(file_paths), description="Processing files") as progress:
        for file_path in file_paths:
            progress.start_file(file_path)

            job = process_file(
                file_path,
                config.layout,
                error_log,
                output_directory=output_directory,
                title=config.title,
                collator=collator,
            )
            succeeded = job.status == JobStatus.SUCCESS
            if succeeded:
                success_count += 1
                total_records += job.record_count
                total_pages += job.page_count
            else:
                failed_count += 1

            progress.set_postfix(success=success_count, failed=failed_count, pages=total_pages)
            progress.finish_file(success=succeeded)

            elapsed = (job.end_time - job.start_time).total_seconds() if job.end_time and job.start_time else 0.0
            file_stats.append(
                FileStat(
                    file_name=job.name,
                    status=job.status.value,
                    records=job.record_count,
                    pages=job.page_count,
                    elapsed_seconds=elapsed,
                )
            )

    # Flush error log once per run
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"failed to write error log: {e}")
    else:
        if log_path is not None:
            logger.info(f"error log: {log_path}")

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=total_records,
        total_pages=total_pages,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
