"""
Low-level HTTP client for the remote identity provider.

Provides request/response plumbing over httpx with an explicit, opt-in
insecure TLS variant.
"""
import json
import logging
import ssl
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import httpx

from ...core.entities import FederationConfig
from ...core.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class RemoteResponse:
    """Status code and raw body of one remote call."""

    status_code: int
    content: bytes = field(repr=False, default=b"")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.content)


class TransportSecurity:
    """TLS verification mode used to build the HTTP client."""

    verify_certificates: bool = True

    def ssl_verify(self) -> Union[bool, ssl.SSLContext]:
        """Value handed to httpx as ``verify``."""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SecureTransport(TransportSecurity):
    """Default mode: certificate chain and hostname are verified."""


class InsecureTransport(TransportSecurity):
    """Trust-all mode: any certificate chain is accepted and hostnames are not checked.

    This is an intentional trust downgrade. Only built when the configuration
    explicitly opts in with ``skip_certificate_validation``.
    """

    verify_certificates = False

    def ssl_verify(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context


def transport_security_for(config: FederationConfig) -> TransportSecurity:
    """Pick the TLS mode a federation instance asked for."""
    if config.skip_certificate_validation:
        logger.warning(
            f"Certificate validation DISABLED for {config.remote_base_url} "
            f"(realm {config.realm}); remote identity is not verified"
        )
        return InsecureTransport()
    return SecureTransport()


class RemoteClient:
    """
    HTTP client bound to one remote base URL.

    Owned by exactly one federation bridge; connections are not shared
    across instances and are released on close().
    """

    def __init__(
        self,
        base_url: str,
        security: Optional[TransportSecurity] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize remote client.

        Args:
            base_url: Remote base URL without trailing slash
            security: TLS mode, secure unless explicitly overridden
            timeout_seconds: Deadline applied to every request
            http_transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.security = security or SecureTransport()
        self.timeout_seconds = timeout_seconds
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None
        self._is_closed = False

        logger.debug(
            f"RemoteClient initialized: base_url={self.base_url}, "
            f"timeout={timeout_seconds}s, security={self.security!r}"
        )

    @classmethod
    def for_config(
        cls,
        config: FederationConfig,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "RemoteClient":
        """Build a client honouring the config's TLS choice."""
        return cls(
            config.remote_base_url,
            security=transport_security_for(config),
            timeout_seconds=timeout_seconds,
            http_transport=http_transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_client(self, operation: str) -> httpx.AsyncClient:
        """Get or create httpx client."""
        if self._is_closed:
            raise UpstreamUnavailable("Remote client is closed", operation=operation)

        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout_seconds),
                verify=self.security.ssl_verify(),
                transport=self._http_transport,
            )
            logger.debug("Created new httpx AsyncClient")

        return self._client

    async def send(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
        *,
        operation: Optional[str] = None,
    ) -> RemoteResponse:
        """
        Send one request and return its status and body.

        Non-2xx statuses are returned, not raised; interpreting them is the
        caller's job.

        Args:
            method: HTTP method
            path: Path (and query string) relative to the base URL
            headers: Request headers
            body: Encoded request body
            operation: Name used in logs and errors

        Raises:
            UpstreamUnavailable: If no response was received (connect, TLS, timeout)
        """
        operation = operation or f"{method} {path.split('?', 1)[0]}"
        client = self._get_client(operation)

        try:
            response = await client.request(
                method,
                path,
                headers=dict(headers or {}),
                content=body.encode("utf-8") if body is not None else None,
            )
        except httpx.HTTPError as e:
            logger.error(f"Remote call failed for {operation}: {type(e).__name__}: {e}")
            raise UpstreamUnavailable(
                "Remote identity provider unreachable",
                operation=operation,
            ) from e

        logger.debug(f"{operation} -> {response.status_code}")
        return RemoteResponse(status_code=response.status_code, content=response.content)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._is_closed:
            return
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._is_closed = True
        logger.debug("RemoteClient closed")
