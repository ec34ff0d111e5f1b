"""User resolution protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from ..entities import LocalUserRecord


@runtime_checkable
class UserResolver(Protocol):
    """Protocol for resolving federated users into local mirror records.

    Defines ONLY the lookup contract the host expects.
    """

    async def resolve_by_id(self, realm: str, external_id: str) -> Optional[LocalUserRecord]:
        """Resolve a user by (possibly prefixed) remote id."""
        ...

    async def resolve_by_username(self, realm: str, username: str) -> Optional[LocalUserRecord]:
        """Resolve a user by exact username, falling back to exact email."""
        ...

    async def resolve_by_email(self, realm: str, email: str) -> Optional[LocalUserRecord]:
        """Resolve a user by exact email."""
        ...

    async def reconcile(self, realm: str, local_user: LocalUserRecord) -> Optional[LocalUserRecord]:
        """Re-validate a previously imported record against the remote."""
        ...
