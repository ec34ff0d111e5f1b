"""Federation bridge orchestrating remote lookups and local mirroring."""

import logging
from typing import Optional

import httpx

from ..config import FederationSettings, get_settings
from ..core.entities import FederationConfig, LocalUserRecord, RemoteUser
from ..core.exceptions import InvalidCredential, UpstreamUnavailable
from ..core.protocols import UserStorage
from ..core.value_objects import CredentialQuery, CredentialType
from ..infrastructure.adapters import RemoteDirectory
from ..infrastructure.repositories import TokenCache
from ..infrastructure.transport import FORM_CONTENT_TYPE, RemoteClient, url_encode

logger = logging.getLogger(__name__)


class FederationBridge:
    """Federation bridge for one configured remote realm.

    Implements the host-facing capabilities (UserResolver, CredentialValidator,
    CredentialAvailabilityChecker) by composing a remote client, a token
    cache and a remote directory. Every successful resolution upserts the
    local mirror record.
    """

    SUPPORTED_CREDENTIAL_TYPES = frozenset(t.value for t in CredentialType)

    def __init__(
        self,
        config: FederationConfig,
        federation_id: str,
        storage: UserStorage,
        *,
        settings: Optional[FederationSettings] = None,
        client: Optional[RemoteClient] = None,
        token_cache: Optional[TokenCache] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize bridge.

        Args:
            config: Validated federation configuration
            federation_id: Id of this instance, written as federation link
            storage: Host's local user storage
            settings: Process settings (defaults to environment)
            client: Pre-built remote client (built from config if omitted)
            token_cache: Pre-built token cache (built from config if omitted)
            http_transport: Optional httpx transport for the built client
        """
        self.config = config
        self.federation_id = federation_id
        self._storage = storage
        self._settings = settings or get_settings()

        self._client = client or RemoteClient.for_config(
            config,
            timeout_seconds=self._settings.http_timeout_seconds,
            http_transport=http_transport,
        )
        self._token_cache = token_cache or TokenCache(
            config,
            self._client,
            expiry_margin_seconds=self._settings.token_expiry_margin_seconds,
        )
        self._directory = RemoteDirectory(
            config,
            self._client,
            self._token_cache,
            max_results=self._settings.directory_max_results,
        )
        self._is_closed = False

        logger.info(f"FederationBridge {federation_id} initialized: {config.to_safe_dict()}")

    @property
    def token_cache(self) -> TokenCache:
        return self._token_cache

    @property
    def directory(self) -> RemoteDirectory:
        return self._directory

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Release the HTTP connection and forget the cached token."""
        if self._is_closed:
            return
        await self._token_cache.clear()
        await self._client.close()
        self._is_closed = True
        logger.info(f"FederationBridge {self.federation_id} closed")

    # User resolution

    async def resolve_by_id(self, realm: str, external_id: str) -> Optional[LocalUserRecord]:
        """Resolve a user by remote id; host prefixes before the last ``:`` are ignored."""
        remote = await self._directory.find_by_id(external_id)
        if remote is None:
            logger.debug(f"No remote user for id {external_id}")
            return None
        return await self._store_user(realm, remote)

    async def resolve_by_username(self, realm: str, username: str) -> Optional[LocalUserRecord]:
        """Resolve by exact username, then by exact email with the same value."""
        logger.debug(f"Retrieving user by username {username}")
        remote = await self._directory.find_by_attribute("username", username)
        if remote is None:
            logger.debug(f"No unique username match for {username}, trying email")
            remote = await self._directory.find_by_attribute("email", username)
        if remote is None:
            return None
        return await self._store_user(realm, remote)

    async def resolve_by_email(self, realm: str, email: str) -> Optional[LocalUserRecord]:
        """Resolve by exact email."""
        logger.debug(f"Retrieving user by email {email}")
        remote = await self._directory.find_by_attribute("email", email)
        if remote is None:
            return None
        return await self._store_user(realm, remote)

    async def reconcile(self, realm: str, local_user: LocalUserRecord) -> Optional[LocalUserRecord]:
        """Re-check a previously imported record against the remote."""
        logger.debug(f"Validating imported user {local_user.username}")
        return await self.resolve_by_username(realm, local_user.username)

    async def _store_user(self, realm: str, remote: RemoteUser) -> LocalUserRecord:
        """Create-if-absent-else-update the local mirror of ``remote``."""
        record = await self._storage.get_user_by_username(realm, remote.username)
        if record is None:
            record = await self._storage.add_user(realm, remote.username)
            logger.info(f"Imported federated user {remote.username} into realm {realm}")

        record.apply_remote(remote, self.federation_id)
        await self._storage.save_user(record)
        return record

    # Credentials

    def supports_credential_type(self, credential_type: str) -> bool:
        return credential_type in self.SUPPORTED_CREDENTIAL_TYPES

    async def is_configured_for(
        self,
        realm: str,
        local_user: LocalUserRecord,
        credential_type: str,
    ) -> bool:
        """Check whether the remote user has the credential type set up.

        Unknown users, unsupported types and remote failures all answer False.
        """
        parsed = CredentialType.parse(credential_type)
        if parsed is None:
            return False
        if not local_user.is_federated:
            logger.debug(f"User {local_user.username} has no external id; not federated here")
            return False

        try:
            remote_types = await self._directory.list_credential_types(local_user.external_id)
        except UpstreamUnavailable as e:
            logger.warning(f"Credential listing unavailable for {local_user.username} in realm {realm}: {e}")
            return False

        return parsed.remote_type in remote_types

    async def validate_credential(
        self,
        realm: str,
        local_user: LocalUserRecord,
        credential: CredentialQuery,
    ) -> bool:
        """Ask the remote token endpoint whether it accepts the user's credential.

        Only the status code is consulted; the response body is discarded and
        no session token is kept.

        Raises:
            UpstreamUnavailable: If the token endpoint cannot be reached
        """
        try:
            await self._grant_user_credential(local_user.username, credential)
        except InvalidCredential as e:
            logger.info(
                f"Credential rejected for {local_user.username} in realm {realm} "
                f"(type {e.credential_type}, status {e.status_code})"
            )
            return False
        # TODO: revoke the remote session the accepted grant creates
        return True

    async def _grant_user_credential(self, username: str, credential: CredentialQuery) -> None:
        credential_type = credential.credential_type
        params = {
            "grant_type": "password",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret.get_secret_value(),
            "username": username,
            credential_type.grant_parameter: credential.challenge_response.get_secret_value(),
        }
        response = await self._client.send(
            "POST",
            self.config.token_path,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=url_encode(params),
            operation=f"token.{credential_type.value}",
        )
        if response.status_code != 200:
            raise InvalidCredential(
                username=username,
                credential_type=credential_type.value,
                status_code=response.status_code,
            )
