"""Federation domain entities."""

from .federation_config import (
    FederationConfig,
    CONFIG_KEYCLOAK_URL,
    CONFIG_KEYCLOAK_REALM,
    CONFIG_KEYCLOAK_CLIENT_ID,
    CONFIG_KEYCLOAK_CLIENT_SECRET,
    CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION,
)
from .remote_user import RemoteUser
from .local_user_record import LocalUserRecord

__all__ = [
    "FederationConfig",
    "CONFIG_KEYCLOAK_URL",
    "CONFIG_KEYCLOAK_REALM",
    "CONFIG_KEYCLOAK_CLIENT_ID",
    "CONFIG_KEYCLOAK_CLIENT_SECRET",
    "CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION",
    "RemoteUser",
    "LocalUserRecord",
]
