# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from qc_print.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("QC_PRINT_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./output
title: QC Print
layout:
  page_size: 100
  column_size: 50
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "qc_print.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def make_workbook(path: Path, rows: list[list[object]], sheets: dict[str, list[list[object]]] | None = None) -> Path:
    """Write ``rows`` as the first sheet of an .xlsx (plus optional extra sheets)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Sheet1", header=False, index=False)
        for name, extra in (sheets or {}).items():
            pd.DataFrame(extra).to_excel(writer, sheet_name=name, header=False, index=False)
    return path


@pytest.fixture()
def workbook_factory(temp_workdir: Path) -> Callable[..., Path]:
    def _factory(name: str, rows: list[list[object]], **kwargs) -> Path:
        return make_workbook(temp_workdir / "data" / name, rows, **kwargs)
    return _factory


@pytest.fixture()
def example_rows() -> list[list[object]]:
    # header, kept, dropped (both empty), kept, kept (C only)
    return [
        ["id", "item", "location"],
        ["x", "b", "z"],
        ["x", "", ""],
        ["x", "a", "z"],
        ["x", "", "m"],
    ]


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    # テスト間で閉じた capture ストリームへの出力を防ぐ
    app_logger = logging.getLogger("qc_print")
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
    reset_logging()
