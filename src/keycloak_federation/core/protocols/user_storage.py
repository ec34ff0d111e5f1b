"""Local user storage protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from ..entities import LocalUserRecord


@runtime_checkable
class UserStorage(Protocol):
    """Protocol for the host's local user store, keyed by realm and username.

    The store owns the records; the bridge reads, creates and saves them.
    """

    async def get_user_by_username(self, realm: str, username: str) -> Optional[LocalUserRecord]:
        """Return the stored record or None."""
        ...

    async def add_user(self, realm: str, username: str) -> LocalUserRecord:
        """Create and return an empty record for ``(realm, username)``."""
        ...

    async def save_user(self, record: LocalUserRecord) -> None:
        """Persist changes made to ``record``."""
        ...
