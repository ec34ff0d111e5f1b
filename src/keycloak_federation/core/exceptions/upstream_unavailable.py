"""Remote directory outage exception."""

from typing import Optional

from .base import FederationError


class UpstreamUnavailable(FederationError):
    """Raised when a remote call fails at transport level or with an unexpected status.

    Carries the operation, realm and status code so the failure can be
    diagnosed from the log line alone.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        realm: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            message,
            error_code="UPSTREAM_UNAVAILABLE",
            details={"operation": operation, "realm": realm, "status_code": status_code},
        )
        self.operation = operation
        self.realm = realm
        self.status_code = status_code

    @property
    def is_transport_failure(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status_code is None

    def __str__(self) -> str:
        parts = [f"operation={self.operation}"]
        if self.realm:
            parts.append(f"realm={self.realm}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return f"{self.message} ({', '.join(parts)})"
