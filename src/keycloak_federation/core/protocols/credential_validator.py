"""Credential validation protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import LocalUserRecord
from ..value_objects import CredentialQuery


@runtime_checkable
class CredentialValidator(Protocol):
    """Protocol for delegated credential checks."""

    def supports_credential_type(self, credential_type: str) -> bool:
        """Check whether the type is one this validator claims at all."""
        ...

    async def validate_credential(
        self,
        realm: str,
        local_user: LocalUserRecord,
        credential: CredentialQuery,
    ) -> bool:
        """Return True only if the remote accepts the credential.

        Invalid credentials yield False, never an exception.
        """
        ...
