from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import MAX_COUNT
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def require_count(value: Any, field_name: str) -> int:
    """Accept a non-negative whole number (int or digit string)."""
    if value is None:
        raise ValidationError(f"{field_name} is required.")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number.")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be a whole number.")
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be a number.")
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a number.")
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative.")
    if value > MAX_COUNT:
        raise ValidationError(f"{field_name} is too large.")
    return value


def require_id(value: Any, field_name: str) -> int:
    ident = require_count(value, field_name)
    if ident == 0:
        raise ValidationError(f"{field_name} is required.")
    return ident


def require_object(payload: Any) -> Mapping[str, Any]:
    """Request bodies must be JSON objects."""
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object.")
    return payload
