"""Rasoi API - Utilities Package."""

from app.utils.security import secrets_match
from app.utils.errors import (
    RasoiException,
    ValidationError,
    AuthorizationError,
    ConfigurationError,
    StoreConnectionError,
)

__all__ = [
    "secrets_match",
    "RasoiException",
    "ValidationError",
    "AuthorizationError",
    "ConfigurationError",
    "StoreConnectionError",
]
