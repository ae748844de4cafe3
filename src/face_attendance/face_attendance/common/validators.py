from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None:
        raise ValidationError(f"Missing required field: {field_name}")
    value = str(value)
    if not value.strip():
        raise ValidationError(f"Missing required field: {field_name}")
    return value.strip()


def require_iso_date(value: Any, field_name: str = "date") -> str:
    value = require_non_empty(value, field_name)
    try:
        # Round-trip rejects non zero-padded forms like 2024-1-5.
        if format_iso_date(parse_iso_date(value)) != value:
            raise ValueError(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return value


def is_subject_name(value: str) -> bool:
    """True if `value` can name a sheet file. Checks the name exactly as given."""
    if not value or not value.strip():
        return False
    return not ("/" in value or "\\" in value or "\x00" in value or value.startswith("."))


def require_subject_name(value: Any) -> str:
    """Subject names end up in file names; reject anything path-like."""
    value = require_non_empty(value, "subject")
    if not is_subject_name(value):
        raise ValidationError(f"Invalid subject name: {value!r}")
    return value
