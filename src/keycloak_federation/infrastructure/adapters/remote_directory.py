"""Remote directory adapter for the admin users API."""

import logging
from typing import Any, Optional, Set

from pydantic import ValidationError

from ...core.entities import FederationConfig, RemoteUser
from ...core.exceptions import UpstreamUnavailable
from ...core.value_objects import RemoteUserId
from ..repositories import TokenCache
from ..transport import RemoteClient, RemoteResponse, url_encode

logger = logging.getLogger(__name__)


class RemoteDirectory:
    """Admin API adapter following maximum separation principle.

    Handles ONLY user queries against the remote admin API.
    Does not touch local storage or validate user credentials.
    """

    def __init__(
        self,
        config: FederationConfig,
        client: RemoteClient,
        token_cache: TokenCache,
        max_results: int = 10,
    ):
        """Initialize remote directory.

        Args:
            config: Federation configuration
            client: Remote client owned by the same bridge
            token_cache: Source of service-credential bearer tokens
            max_results: Upper bound requested from the search endpoint
        """
        self._config = config
        self._client = client
        self._token_cache = token_cache
        self._max_results = max_results

    async def _get(self, path: str, operation: str) -> RemoteResponse:
        token = await self._token_cache.get_token()
        return await self._client.send(
            "GET",
            path,
            headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            operation=operation,
        )

    def _unavailable(self, operation: str, response: RemoteResponse) -> UpstreamUnavailable:
        logger.error(
            f"Remote {operation} failed in realm {self._config.realm} "
            f"with status {response.status_code}"
        )
        return UpstreamUnavailable(
            "Remote directory query failed",
            operation=operation,
            realm=self._config.realm,
            status_code=response.status_code,
        )

    async def find_by_attribute(self, name: str, value: str) -> Optional[RemoteUser]:
        """Search users by one exact attribute.

        Returns a user only when exactly one result comes back; zero or
        several results both mean "not found".

        Args:
            name: Query attribute (``username``, ``email``, ...)
            value: Exact value to match

        Returns:
            The single matching user, or None

        Raises:
            UpstreamUnavailable: On transport failure or a non-2xx status
        """
        operation = f"users.search.{name}"
        params = {
            "max": str(self._max_results),
            "briefRepresentation": "true",
            "emailVerified": "true",
            "enabled": "true",
            "exact": "true",
            name: value,
        }
        response = await self._get(f"{self._config.admin_users_path}?{url_encode(params)}", operation)
        if not response.ok:
            raise self._unavailable(operation, response)

        try:
            payload = response.json()
        except ValueError as e:
            raise self._unavailable(operation, response) from e
        if not isinstance(payload, list):
            raise self._unavailable(operation, response)

        logger.debug(f"{operation} in realm {self._config.realm} got {len(payload)} results")
        if len(payload) != 1:
            return None

        return self._parse_user(payload[0], operation)

    async def find_by_id(self, raw_id: str) -> Optional[RemoteUser]:
        """Fetch one user by id, ignoring any host prefix on the id.

        Returns:
            The user, or None when absent or unparseable

        Raises:
            UpstreamUnavailable: On transport failure or a status other than 2xx/404
        """
        operation = "users.get"
        try:
            remote_id = RemoteUserId.from_external(raw_id)
        except ValueError:
            logger.debug(f"Ignoring unusable remote id derived from {raw_id!r}")
            return None

        logger.debug(f"Retrieving user by id {remote_id}")
        response = await self._get(f"{self._config.admin_users_path}/{remote_id.path_segment}", operation)
        if response.status_code == 404:
            return None
        if not response.ok:
            raise self._unavailable(operation, response)

        try:
            payload = response.json()
        except ValueError:
            logger.warning(f"{operation} returned a non-JSON body for {remote_id}")
            return None

        return self._parse_user(payload, operation)

    async def list_credential_types(self, remote_id: str) -> Set[str]:
        """List the credential types configured for a remote user.

        Advisory: a non-2xx status yields an empty set instead of an error.

        Raises:
            UpstreamUnavailable: Only when no response was received
        """
        operation = "users.credentials"
        try:
            user_id = RemoteUserId(remote_id)
        except ValueError:
            logger.debug(f"Ignoring unusable remote id {remote_id!r}")
            return set()

        response = await self._get(
            f"{self._config.admin_users_path}/{user_id.path_segment}/credentials", operation
        )
        if not response.ok:
            logger.warning(
                f"Remote {operation} failed in realm {self._config.realm} "
                f"with status {response.status_code}; treating as none configured"
            )
            return set()

        try:
            payload = response.json()
        except ValueError:
            logger.warning(f"{operation} returned a non-JSON body for {remote_id}")
            return set()
        if not isinstance(payload, list):
            return set()

        return {
            str(item["type"])
            for item in payload
            if isinstance(item, dict) and item.get("type")
        }

    def _parse_user(self, payload: Any, operation: str) -> Optional[RemoteUser]:
        if not isinstance(payload, dict):
            logger.warning(f"{operation} returned a non-object user representation")
            return None
        try:
            user = RemoteUser.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"{operation} returned an unusable user representation: {e.error_count()} errors")
            return None
        logger.debug(f"Got remote user {user.id}")
        return user
