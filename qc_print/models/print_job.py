from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from .page import Page

"""PrintJob domain model and JobStatus enum.

A PrintJob is the processing context of a single spreadsheet, tracking its
status from pending to success/failed and holding the resulting pages.
"""


class JobStatus(Enum):
    """Status of a PrintJob.

    State transitions: pending → processing → (success | failed)
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class PrintJob:
    """Outcome of running the pipeline on one spreadsheet file."""
    path: Path                          # Full path to the spreadsheet
    name: str                           # File name
    pages: list[Page] = field(default_factory=list)
    start_time: datetime | None = None  # Processing start (UTC)
    end_time: datetime | None = None    # Processing end (UTC)
    status: JobStatus = JobStatus.PENDING
    record_count: int = 0               # Ranked records over all pages
    output_path: Path | None = None     # Written print HTML, if any
    error: str | None = None            # Failure reason summary

    @property
    def page_count(self) -> int:
        return len(self.pages)
