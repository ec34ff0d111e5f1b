"""HTTP transport to the remote identity provider."""

from .encoding import url_encode
from .remote_client import (
    FORM_CONTENT_TYPE,
    InsecureTransport,
    RemoteClient,
    RemoteResponse,
    SecureTransport,
    TransportSecurity,
    transport_security_for,
)

__all__ = [
    "url_encode",
    "FORM_CONTENT_TYPE",
    "InsecureTransport",
    "RemoteClient",
    "RemoteResponse",
    "SecureTransport",
    "TransportSecurity",
    "transport_security_for",
]
