"""Configuration failure exception."""

from typing import Optional

from .base import FederationError


class ConfigurationError(FederationError):
    """Raised when a federation instance is configured incorrectly.

    Fatal at setup time and never retried.
    """

    def __init__(self, message: str, *, option: Optional[str] = None) -> None:
        details = {"option": option} if option else {}
        super().__init__(message, error_code="CONFIGURATION_ERROR", details=details)
        self.option = option

    @classmethod
    def missing_option(cls, option: str) -> "ConfigurationError":
        """Create exception for a required option that was not supplied."""
        return cls(f"missing required option: {option}", option=option)
