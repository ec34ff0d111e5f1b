"""Federation exceptions.

Each exception covers exactly one failure family of the bridge.
"""

from .base import FederationError, create_error_response
from .configuration_error import ConfigurationError
from .upstream_auth_error import UpstreamAuthError
from .upstream_unavailable import UpstreamUnavailable
from .invalid_credential import InvalidCredential

__all__ = [
    "FederationError",
    "create_error_response",
    "ConfigurationError",
    "UpstreamAuthError",
    "UpstreamUnavailable",
    "InvalidCredential",
]
