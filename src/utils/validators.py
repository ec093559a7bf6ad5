"""Lightweight validation helpers for handler payloads."""

from typing import Any

from utils.error_handling import ValidationError


def ensure_type(value: Any, expected: type, field: str) -> None:
    """Raise ValidationError when a payload field has the wrong JSON type (``None`` passes)."""
    if value is not None and not isinstance(value, expected):
        raise ValidationError(f"{field} must be of type {expected.__name__}")
