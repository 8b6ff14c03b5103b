"""
Rasoi API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class RasoiException(Exception):
    """
    Base exception class for the Rasoi API.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ValidationError(RasoiException):
    """
    Exception raised when a required identifier or key is missing.

    Used when:
    - userId absent or empty
    - weekStart absent or empty
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class AuthorizationError(RasoiException):
    """
    Exception raised when the admin secret is absent or does not match.
    """

    def __init__(
        self,
        message: str = "Forbidden",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=403,
            detail=detail
        )


class ConfigurationError(RasoiException):
    """
    Exception raised for missing server configuration.

    Used when:
    - MONGODB_URI not set
    """

    def __init__(
        self,
        message: str = "Server misconfigured",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )


class StoreConnectionError(RasoiException):
    """
    Exception raised when the MongoDB connect attempt fails.

    The underlying driver message is passed through unchanged.
    """

    def __init__(
        self,
        message: str = "MongoDB connection failed",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
