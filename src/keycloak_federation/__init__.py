"""keycloak-federation - delegate user lookup and credential checks to a remote Keycloak.

Resolves users against a remote realm's admin API, mirrors them into local
storage and validates credentials with the remote token endpoint.
"""

from .__version__ import __version__

from .core import (
    CachedToken,
    CredentialQuery,
    CredentialType,
    RemoteUserId,
    FederationError,
    ConfigurationError,
    UpstreamAuthError,
    UpstreamUnavailable,
    InvalidCredential,
    create_error_response,
    FederationConfig,
    RemoteUser,
    LocalUserRecord,
    UserResolver,
    CredentialValidator,
    CredentialAvailabilityChecker,
    UserStorage,
)
from .config import FederationSettings, get_settings, setup_logging
from .infrastructure import (
    RemoteClient,
    RemoteResponse,
    SecureTransport,
    InsecureTransport,
    TokenCache,
    RemoteDirectory,
    InMemoryUserStorage,
    url_encode,
)
from .application import FederationBridge
from .factory import FederationProviderFactory, ConfigProperty, PropertyType, PROVIDER_ID

__all__ = [
    "__version__",

    # Core
    "CachedToken",
    "CredentialQuery",
    "CredentialType",
    "RemoteUserId",
    "FederationError",
    "ConfigurationError",
    "UpstreamAuthError",
    "UpstreamUnavailable",
    "InvalidCredential",
    "create_error_response",
    "FederationConfig",
    "RemoteUser",
    "LocalUserRecord",
    "UserResolver",
    "CredentialValidator",
    "CredentialAvailabilityChecker",
    "UserStorage",

    # Config
    "FederationSettings",
    "get_settings",
    "setup_logging",

    # Infrastructure
    "RemoteClient",
    "RemoteResponse",
    "SecureTransport",
    "InsecureTransport",
    "TokenCache",
    "RemoteDirectory",
    "InMemoryUserStorage",
    "url_encode",

    # Application
    "FederationBridge",
    "FederationProviderFactory",
    "ConfigProperty",
    "PropertyType",
    "PROVIDER_ID",
]
