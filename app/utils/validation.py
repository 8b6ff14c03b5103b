"""Rasoi API - Presence checks for required keys."""

from typing import Any

from app.utils.errors import ValidationError


def require(value: Any, field: str) -> None:
    """Raise ValidationError if a required key is missing or empty."""
    if value is None or value == "":
        raise ValidationError(f"{field} required")
