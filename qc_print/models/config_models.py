from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the QC print generator.

These are the typed results of ``qc_print.config.loader.load_config``; the
loader owns YAML parsing and schema validation.
"""

DEFAULT_PAGE_SIZE = 100
DEFAULT_COLUMN_SIZE = 50


@dataclass(frozen=True)
class LayoutConfig:
    """Print grid geometry.

    A page holds ``page_size`` records split over two columns of
    ``column_size`` rows. ``page_size`` may not exceed two columns.
    """
    page_size: int = DEFAULT_PAGE_SIZE
    column_size: int = DEFAULT_COLUMN_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1 or self.column_size < 1:
            raise ValueError(
                f"layout sizes must be positive (page_size={self.page_size}, column_size={self.column_size})"
            )
        if self.page_size > 2 * self.column_size:
            raise ValueError(
                f"page_size {self.page_size} does not fit in two columns of {self.column_size}"
            )


@dataclass(frozen=True)
class PrintConfig:
    """Root configuration object for a print run."""
    source_directory: str  # Directory scanned when no files are given on the command line
    output_directory: str = "./output"  # Where print HTML files are written
    title: str = "QC Print"  # Document title of the rendered pages
    layout: LayoutConfig = field(default_factory=LayoutConfig)
