from __future__ import annotations

import json

import jsonschema
import pytest

from qc_print.logging.error_log import SCHEMA_PATH
from qc_print.models.error_record import ErrorRecord

"""Error log JSON schema contract test."""


def _schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example():
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "stock.xlsx",
        "error_type": "DECODE_ERROR",
        "message": "cannot read spreadsheet: File is not a zip file",
    }
    jsonschema.validate(record, _schema())


def test_error_log_schema_rejects_extra_key():
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "stock.xlsx",
        "error_type": "DECODE_ERROR",
        "message": "bad",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, _schema())


def test_created_records_satisfy_schema():
    rec = ErrorRecord.create("stock.xlsx", "DECODE_ERROR", "bad")
    jsonschema.validate(json.loads(rec.to_json_line()), _schema())
