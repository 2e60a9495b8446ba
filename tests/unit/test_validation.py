"""Tests for payload validation helpers."""

import pytest

from utils.validation import (
    SCHOOL_FIELDS,
    YEAR_FIELDS,
    PayloadValidationError,
    validate_records,
    validate_total,
)


def test_validate_total_passes_integer_through():
    assert validate_total({"total": 0}) == 0
    assert validate_total({"total": 1234}) == 1234


@pytest.mark.parametrize("payload", [
    [],
    {"count": 3},
    {"total": "42"},
    {"total": 4.2},
    {"total": True},
    {"total": None},
])
def test_validate_total_rejects_bad_payloads(payload):
    with pytest.raises(PayloadValidationError):
        validate_total(payload)


def test_validate_records_accepts_empty_list():
    assert validate_records([], YEAR_FIELDS) == []


def test_validate_records_keeps_order():
    payload = [
        {"academic_year": "2021/22", "count": 3},
        {"academic_year": "2020/21", "count": 5},
    ]
    assert [r["academic_year"] for r in validate_records(payload, YEAR_FIELDS)] == [
        "2021/22",
        "2020/21",
    ]


def test_validate_records_reports_offending_record():
    payload = [
        {"secondary_school": "A", "count": 1},
        {"secondary_school": None, "count": 2},
    ]
    with pytest.raises(PayloadValidationError, match="record 1"):
        validate_records(payload, SCHOOL_FIELDS)


def test_validate_records_rejects_non_object_items():
    with pytest.raises(PayloadValidationError, match="not an object"):
        validate_records(["A"], SCHOOL_FIELDS)


def test_payload_validation_error_is_value_error():
    assert issubclass(PayloadValidationError, ValueError)
