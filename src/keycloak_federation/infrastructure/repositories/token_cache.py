"""Single-slot service-credential token cache."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ...core.entities import FederationConfig
from ...core.exceptions import UpstreamAuthError
from ...core.value_objects import CachedToken
from ..transport import FORM_CONTENT_TYPE, RemoteClient, url_encode

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenCache:
    """Client-credentials token cache following maximum separation principle.

    Handles ONLY acquiring and holding the service-credential token of one
    federation instance. Refreshes are single-flight: concurrent callers that
    find the token expired wait for one refresh instead of each issuing one.
    """

    def __init__(
        self,
        config: FederationConfig,
        client: RemoteClient,
        expiry_margin_seconds: int = 5,
        clock: Optional[Clock] = None,
    ):
        """Initialize token cache.

        Args:
            config: Federation configuration (credentials and realm)
            client: Remote client owned by the same bridge
            expiry_margin_seconds: Seconds subtracted from ``expires_in``
            clock: Source of "now" (UTC); injectable for tests
        """
        self._config = config
        self._client = client
        self._expiry_margin_seconds = expiry_margin_seconds
        self._clock = clock or _utc_now
        self._token: Optional[CachedToken] = None
        self._lock = asyncio.Lock()
        self._refresh_count = 0

    @property
    def cached(self) -> Optional[CachedToken]:
        return self._token

    @property
    def refresh_count(self) -> int:
        """Number of token requests issued so far."""
        return self._refresh_count

    def _valid_token(self) -> Optional[str]:
        token = self._token
        if token is not None and token.is_valid_at(self._clock()):
            return token.value
        return None

    async def get_token(self) -> str:
        """Return a valid bearer token, refreshing it if expired.

        Raises:
            UpstreamAuthError: If the remote rejects the client credentials
            UpstreamUnavailable: If the token endpoint cannot be reached
        """
        value = self._valid_token()
        if value is not None:
            return value

        async with self._lock:
            # another caller may have refreshed while we waited
            value = self._valid_token()
            if value is not None:
                return value

            token = await self._request_token()
            self._token = token
            return token.value

    async def _request_token(self) -> CachedToken:
        realm = self._config.realm
        logger.debug(f"Retrieving new service token for realm {realm}")
        self._refresh_count += 1

        params = {
            "grant_type": "client_credentials",
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret.get_secret_value(),
        }
        response = await self._client.send(
            "POST",
            self._config.token_path,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=url_encode(params),
            operation="token.client_credentials",
        )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            logger.error(
                f"Token endpoint returned unreadable body for realm {realm} "
                f"(status {response.status_code})"
            )
            raise UpstreamAuthError(
                "Token endpoint returned an unreadable response",
                realm=realm,
                status_code=response.status_code,
            )

        if payload.get("error"):
            error = str(payload["error"])
            description = payload.get("error_description") or error
            logger.error(
                f"Service credential grant rejected for realm {realm} "
                f"(status {response.status_code}, error {error})"
            )
            raise UpstreamAuthError(
                str(description),
                realm=realm,
                status_code=response.status_code,
                error=error,
            )

        access_token = payload.get("access_token")
        expires_in = payload.get("expires_in")
        if response.status_code != 200 or not access_token or not isinstance(expires_in, (int, float)):
            logger.error(
                f"Token endpoint returned no usable token for realm {realm} "
                f"(status {response.status_code})"
            )
            raise UpstreamAuthError(
                "Token endpoint returned no usable token",
                realm=realm,
                status_code=response.status_code,
            )

        token = CachedToken.issued(
            str(access_token),
            int(expires_in),
            self._expiry_margin_seconds,
            now=self._clock(),
        )
        logger.debug(f"Cached {token!r} for realm {realm}")
        return token

    async def clear(self) -> None:
        """Drop the cached token so it can never be reused."""
        async with self._lock:
            self._token = None
        logger.debug(f"Token cache cleared for realm {self._config.realm}")
