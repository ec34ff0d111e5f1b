"""Provider factory: option declarations, validation and bridge construction."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional

import httpx

from .application import FederationBridge
from .config import FederationSettings
from .core.entities import (
    CONFIG_KEYCLOAK_CLIENT_ID,
    CONFIG_KEYCLOAK_CLIENT_SECRET,
    CONFIG_KEYCLOAK_REALM,
    CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION,
    CONFIG_KEYCLOAK_URL,
    FederationConfig,
)
from .core.protocols import UserStorage

logger = logging.getLogger(__name__)

PROVIDER_ID = "Keycloak"


class PropertyType(str, Enum):
    """Widget type of a configuration option."""
    STRING = "String"
    BOOLEAN = "boolean"
    PASSWORD = "Password"


@dataclass(frozen=True)
class ConfigProperty:
    """Declaration of one configuration option shown to administrators."""

    name: str
    label: str
    type: PropertyType
    help_text: str
    required: bool = False
    default_value: Optional[Any] = None

    @property
    def secret(self) -> bool:
        return self.type is PropertyType.PASSWORD


PROVIDER_CONFIG_PROPERTIES: List[ConfigProperty] = [
    ConfigProperty(
        name=CONFIG_KEYCLOAK_URL,
        label="Keycloak URL",
        type=PropertyType.STRING,
        help_text="The base URL of your other Keycloak instance",
        required=True,
    ),
    ConfigProperty(
        name=CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION,
        label="Skip Certificate Validation",
        type=PropertyType.BOOLEAN,
        help_text="Disables validation of remote HTTPS certificates",
        required=False,
        default_value=False,
    ),
    ConfigProperty(
        name=CONFIG_KEYCLOAK_REALM,
        label="Realm",
        type=PropertyType.STRING,
        help_text="The connected realm of your other Keycloak instance",
        required=True,
    ),
    ConfigProperty(
        name=CONFIG_KEYCLOAK_CLIENT_ID,
        label="Client ID",
        type=PropertyType.STRING,
        help_text="The client ID of a service account in your other Keycloak instance",
        required=True,
    ),
    ConfigProperty(
        name=CONFIG_KEYCLOAK_CLIENT_SECRET,
        label="Client Secret",
        type=PropertyType.PASSWORD,
        help_text="The client secret of a service account in your other Keycloak instance",
        required=True,
    ),
]


class FederationProviderFactory:
    """Factory the host uses to declare, validate and instantiate federations.

    Handles ONLY provider-level concerns; one bridge is created per
    configured federation instance.
    """

    def __init__(self, settings: Optional[FederationSettings] = None):
        self._settings = settings

    @property
    def id(self) -> str:
        return PROVIDER_ID

    def get_config_properties(self) -> List[ConfigProperty]:
        return list(PROVIDER_CONFIG_PROPERTIES)

    def validate_configuration(self, properties: Mapping[str, Any]) -> FederationConfig:
        """Build and validate a configuration.

        Raises:
            ConfigurationError: If an option is missing or the URL is invalid
        """
        config = FederationConfig.from_properties(properties)
        config.validate()
        return config

    def create(
        self,
        component_id: str,
        properties: Mapping[str, Any],
        storage: UserStorage,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> FederationBridge:
        """Create the bridge for one configured federation instance."""
        config = self.validate_configuration(properties)
        logger.debug(f"Creating {PROVIDER_ID} federation {component_id}")
        return FederationBridge(
            config,
            component_id,
            storage,
            settings=self._settings,
            http_transport=http_transport,
        )
