"""Federation infrastructure: HTTP transport, token cache, directory adapter and storage."""

from .transport import (
    RemoteClient,
    RemoteResponse,
    SecureTransport,
    InsecureTransport,
    TransportSecurity,
    transport_security_for,
    url_encode,
)
from .repositories import TokenCache, InMemoryUserStorage
from .adapters import RemoteDirectory

__all__ = [
    "RemoteClient",
    "RemoteResponse",
    "SecureTransport",
    "InsecureTransport",
    "TransportSecurity",
    "transport_security_for",
    "url_encode",
    "TokenCache",
    "InMemoryUserStorage",
    "RemoteDirectory",
]
