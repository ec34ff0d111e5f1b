"""Base exceptions for keycloak-federation.

This module defines the base exception hierarchy for the federation bridge.
All exceptions inherit from FederationError and carry an error code and
structured details that are safe to log (never secrets).
"""

from typing import Any, Dict, Optional


class FederationError(Exception):
    """Base exception for all federation errors.

    All exceptions raised by the bridge inherit from this base class and
    include structured error information for diagnostics.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
    ):
        super().__init__(message, *args)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: FederationError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The federation exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
