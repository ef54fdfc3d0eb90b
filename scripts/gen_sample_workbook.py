#!/usr/bin/env python3
"""Sample workbook generator for manual print checks.

Writes a single-sheet .xlsx in the layout the QC print pipeline reads:
- Row 1: header row (A: id, B: item, C: location)
- Row 2+: data rows, a share of them blank in B and C, some duplicates

Useful for eyeballing multi-page output, e.g. 250 rows -> 3 pages.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

LOCATIONS = ["Aisle 1", "Aisle 2", "Bay A", "Bay B", "Cold Store", "Dock", "Mezzanine"]


def generate_rows(rows: int, blank_ratio: float = 0.1, seed: int = 42) -> list[list[Any]]:
    """Generate header + data rows.

    Args:
        rows: Number of data rows (blank ones included)
        blank_ratio: Fraction of rows with both B and C empty
        seed: Random seed for reproducible data
    """
    rng = np.random.default_rng(seed)
    sheet: list[list[Any]] = [["id", "item", "location"]]
    for i in range(1, rows + 1):
        if rng.random() < blank_ratio:
            sheet.append([i, None, None])
            continue
        item = f"Item_{rng.integers(1000, 9999)}_{chr(65 + (i % 26))}"
        location = str(rng.choice(LOCATIONS))
        # B のみ / C のみの行も混ぜる
        roll = rng.random()
        if roll < 0.05:
            location = None
        elif roll < 0.10:
            item = None
        sheet.append([i, item, location])
    return sheet


def create_workbook(output_path: Path, rows: int, blank_ratio: float, seed: int) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(generate_rows(rows, blank_ratio, seed))
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Sheet1", header=False, index=False)
    print(f"Created workbook: {output_path} ({rows} data rows)")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a sample workbook for QC print checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/sample.xlsx
  %(prog)s data/large.xlsx --rows 5000 --blank-ratio 0.2 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output .xlsx path")
    parser.add_argument("--rows", type=int, default=250, help="Number of data rows (default: 250)")
    parser.add_argument("--blank-ratio", type=float, default=0.1, help="Share of blank rows (default: 0.1)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0.0 <= args.blank_ratio < 1.0:
        print("Error: --blank-ratio must be in [0, 1)", file=sys.stderr)
        return 1

    try:
        create_workbook(args.output, args.rows, args.blank_ratio, args.seed)
    except OSError as e:
        print(f"Error generating workbook: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
