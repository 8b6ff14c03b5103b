"""Rasoi API - Routes Package."""

from app.routes import (
    admin,
    claude,
    menu,
    profile,
)

__all__ = [
    "admin",
    "claude",
    "menu",
    "profile",
]
