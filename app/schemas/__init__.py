"""Rasoi API - Schemas Package."""

from app.schemas.menu import MenuSaveRequest

__all__ = [
    "MenuSaveRequest",
]
