"""Validation utilities for Registration Statistics Service payloads."""

from typing import Any, Dict, List, Tuple


# (field name, expected type) per record kind
PROGRAMME_FIELDS: Tuple[Tuple[str, type], ...] = (("study_programme", str), ("count", int))
YEAR_FIELDS: Tuple[Tuple[str, type], ...] = (("academic_year", str), ("count", int))
SCHOOL_FIELDS: Tuple[Tuple[str, type], ...] = (("secondary_school", str), ("count", int))


class PayloadValidationError(ValueError):
    """Raised when a response body does not match the expected shape."""


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_total(payload: Any) -> int:
    """Return the ``total`` field of a total-registrations payload unchanged."""
    if not isinstance(payload, dict) or "total" not in payload:
        raise PayloadValidationError("expected an object with a 'total' field")
    total = payload["total"]
    if not _is_int(total):
        raise PayloadValidationError(f"'total' must be an integer, got {type(total).__name__}")
    return total


def validate_records(
    payload: Any,
    fields: Tuple[Tuple[str, type], ...],
) -> List[Dict[str, Any]]:
    """Validate a list of count records.

    Args:
        payload: Decoded JSON body
        fields: Required (name, type) pairs for every record

    Returns:
        The records, each reduced to the required fields

    Raises:
        PayloadValidationError: If the payload is not a list of matching objects
    """
    if not isinstance(payload, list):
        raise PayloadValidationError(f"expected a list, got {type(payload).__name__}")

    records = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise PayloadValidationError(f"record {idx} is not an object")
        record = {}
        for name, expected in fields:
            if name not in item:
                raise PayloadValidationError(f"record {idx} is missing '{name}'")
            value = item[name]
            ok = _is_int(value) if expected is int else isinstance(value, expected)
            if not ok:
                raise PayloadValidationError(
                    f"record {idx} field '{name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            record[name] = value
        records.append(record)
    return records
