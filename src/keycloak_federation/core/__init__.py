"""Core federation domain objects.

Components:
- value_objects: Immutable tokens, identifiers and credential queries
- exceptions: Federation error taxonomy
- protocols: Contracts exposed to, and expected from, the host
- entities: Configuration, remote and local user records

No I/O happens in this package.
"""

from .value_objects import CachedToken, CredentialQuery, CredentialType, RemoteUserId
from .exceptions import (
    FederationError,
    ConfigurationError,
    UpstreamAuthError,
    UpstreamUnavailable,
    InvalidCredential,
    create_error_response,
)
from .entities import FederationConfig, RemoteUser, LocalUserRecord
from .protocols import UserResolver, CredentialValidator, CredentialAvailabilityChecker, UserStorage

__all__ = [
    # Value Objects
    "CachedToken",
    "CredentialQuery",
    "CredentialType",
    "RemoteUserId",

    # Exceptions
    "FederationError",
    "ConfigurationError",
    "UpstreamAuthError",
    "UpstreamUnavailable",
    "InvalidCredential",
    "create_error_response",

    # Entities
    "FederationConfig",
    "RemoteUser",
    "LocalUserRecord",

    # Protocols
    "UserResolver",
    "CredentialValidator",
    "CredentialAvailabilityChecker",
    "UserStorage",
]
