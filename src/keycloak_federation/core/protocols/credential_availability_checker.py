"""Credential availability protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import LocalUserRecord


@runtime_checkable
class CredentialAvailabilityChecker(Protocol):
    """Protocol for asking whether a user has a credential type configured."""

    async def is_configured_for(
        self,
        realm: str,
        local_user: LocalUserRecord,
        credential_type: str,
    ) -> bool:
        """Advisory check; failures answer False instead of raising."""
        ...
