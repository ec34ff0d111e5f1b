"""Rejected user credential."""

from typing import Optional

from .base import FederationError


class InvalidCredential(FederationError):
    """Raised internally when the remote grant rejects a user credential.

    The bridge converts this into a plain ``False``; invalid credentials are an
    expected outcome and never reach the host as an exception.
    """

    def __init__(
        self,
        *,
        username: Optional[str] = None,
        credential_type: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            "Credential rejected by remote",
            error_code="INVALID_CREDENTIAL",
            details={
                "username": username,
                "credential_type": credential_type,
                "status_code": status_code,
            },
        )
        self.username = username
        self.credential_type = credential_type
        self.status_code = status_code
