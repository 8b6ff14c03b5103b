"""
Rasoi API - Security Utilities.

Shared-secret comparison helpers.
"""

import hmac
from typing import Optional


def secrets_match(supplied: Optional[str], expected: Optional[str]) -> bool:
    """
    Compare a caller-supplied secret against the configured one.

    Comparison runs in constant time. An unconfigured (empty) expected
    secret never matches, whatever is supplied.

    Args:
        supplied: Secret sent by the caller, possibly None.
        expected: Secret configured on the server, possibly None.

    Returns:
        bool: True only if both are non-empty and equal.

    Example:
        >>> secrets_match("s3cret", "s3cret")
        True
        >>> secrets_match("s3cret", None)
        False
    """
    if not expected or supplied is None:
        return False

    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
