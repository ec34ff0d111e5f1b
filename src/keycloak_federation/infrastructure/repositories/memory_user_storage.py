"""In-memory local user storage."""

import asyncio
import logging
from typing import Dict, Optional, Tuple

from ...core.entities import LocalUserRecord

logger = logging.getLogger(__name__)


class InMemoryUserStorage:
    """Local user store keyed by ``(realm, username)``.

    Handles ONLY record bookkeeping for hosts without their own store.
    Records are handed out by reference; ``save_user`` re-registers them.
    """

    def __init__(self) -> None:
        self._users: Dict[Tuple[str, str], LocalUserRecord] = {}
        self._lock = asyncio.Lock()

    async def get_user_by_username(self, realm: str, username: str) -> Optional[LocalUserRecord]:
        return self._users.get((realm, username))

    async def add_user(self, realm: str, username: str) -> LocalUserRecord:
        async with self._lock:
            existing = self._users.get((realm, username))
            if existing is not None:
                return existing
            record = LocalUserRecord(realm=realm, username=username)
            self._users[record.key] = record
            logger.debug(f"Created local user {username} in realm {realm}")
            return record

    async def save_user(self, record: LocalUserRecord) -> None:
        async with self._lock:
            self._users[record.key] = record

    def __len__(self) -> int:
        return len(self._users)
