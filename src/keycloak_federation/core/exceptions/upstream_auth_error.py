"""Service-credential grant rejection."""

from typing import Optional

from .base import FederationError


class UpstreamAuthError(FederationError):
    """Raised when the remote token endpoint rejects the client-credentials grant.

    No directory query can proceed without a service token, so this is always
    propagated to the caller.
    """

    def __init__(
        self,
        message: str = "Service credential grant rejected",
        *,
        realm: Optional[str] = None,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            error_code="UPSTREAM_AUTH_ERROR",
            details={"realm": realm, "status_code": status_code, "error": error},
        )
        self.realm = realm
        self.status_code = status_code
        self.error = error
