from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required.")
    return str(value).strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters.")
    return value


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValidationError(f"{field_name} is required.")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a number.")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}.")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be at most {maximum}.")
    return number


def require_date(value: Any, field_name: str) -> date:
    raw = require_non_empty(value, field_name)
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD).")


def require_int_list(value: Any, field_name: str) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list.")
    return [require_int(v, field_name, minimum=1) for v in value]


def parse_semester(value: Any) -> int:
    """Accept ``3``, ``"3"`` or the form label ``"Semester 3"``."""

    raw = require_non_empty(value, "Semester")
    token = raw.split()[-1]
    try:
        semester = int(token)
    except ValueError:
        raise ValidationError("Invalid semester format.")
    if semester < 1:
        raise ValidationError("Invalid semester format.")
    return semester
