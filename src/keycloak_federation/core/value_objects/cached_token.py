"""Cached service-credential token value object."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class CachedToken:
    """Service-credential bearer token with its effective expiry.

    Handles ONLY token representation and expiry checks.
    Does not refresh itself - that's handled by the token cache.
    """

    value: str
    expires_at: datetime

    def __post_init__(self) -> None:
        """Validate cached token."""
        if not self.value:
            raise ValueError("Token value cannot be empty")

        if self.expires_at.tzinfo is None:
            object.__setattr__(self, "expires_at", self.expires_at.replace(tzinfo=timezone.utc))

    @classmethod
    def issued(
        cls,
        value: str,
        expires_in: int,
        margin_seconds: int,
        now: Optional[datetime] = None,
    ) -> "CachedToken":
        """Create a token expiring ``expires_in - margin_seconds`` after ``now``."""
        now = now or datetime.now(timezone.utc)
        return cls(value=value, expires_at=now + timedelta(seconds=expires_in - margin_seconds))

    def is_valid_at(self, now: datetime) -> bool:
        """A token is usable only while its expiry is strictly after ``now``."""
        return self.expires_at > now

    def mask_for_logging(self) -> str:
        """Return masked token safe for logging."""
        if len(self.value) <= 20:
            return "***"
        return f"{self.value[:8]}...{self.value[-8:]}"

    def __str__(self) -> str:
        return f"CachedToken({self.mask_for_logging()})"

    def __repr__(self) -> str:
        return f"CachedToken(value='{self.mask_for_logging()}', expires_at={self.expires_at.isoformat()})"
