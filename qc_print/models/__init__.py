"""Domain models for the QC print generator.

Records flow forward through the pipeline: Record -> RankedRecord -> Page.
Batch-level models (PrintJob, ProcessingResult) describe one CLI run.
"""

from .config_models import LayoutConfig, PrintConfig
from .page import BLANK_SLOT, BlankSlot, Page
from .print_job import JobStatus, PrintJob
from .record import RankedRecord, Record

__all__ = [
    # Configuration models
    "LayoutConfig",
    "PrintConfig",
    # Pipeline models
    "Record",
    "RankedRecord",
    "BlankSlot",
    "BLANK_SLOT",
    "Page",
    # Processing models
    "JobStatus",
    "PrintJob",
]
