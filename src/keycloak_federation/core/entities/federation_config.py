"""Federation instance configuration entity."""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import urlsplit

from pydantic import SecretStr

from ..exceptions import ConfigurationError

CONFIG_KEYCLOAK_URL = "keycloak.url"
CONFIG_KEYCLOAK_REALM = "keycloak.realm"
CONFIG_KEYCLOAK_CLIENT_ID = "keycloak.client_id"
CONFIG_KEYCLOAK_CLIENT_SECRET = "keycloak.client_secret"
CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION = "keycloak.skip_certificate_validation"

PropertyValue = Union[str, Sequence[str], None]

# Registered names, IPv4, and bracketed IPv6 literals (brackets already stripped)
_HOST_PATTERN = re.compile(r"^(?:[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?(?:\.[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?)*\.?|[0-9A-Fa-f:.]*:[0-9A-Fa-f:.]*)$")


def _first(properties: Mapping[str, PropertyValue], key: str) -> Optional[str]:
    """Return the first value stored under ``key`` in a possibly multi-valued map."""
    value = properties.get(key)
    if value is None or isinstance(value, str):
        return value
    return next(iter(value), None)


def _required(properties: Mapping[str, PropertyValue], key: str) -> str:
    value = _first(properties, key)
    if value is None or not value.strip():
        raise ConfigurationError.missing_option(key)
    return value.strip()


@dataclass(frozen=True)
class FederationConfig:
    """Connection parameters for one federation instance.

    Handles ONLY typed access to the configured options.
    Immutable once built; validated once before use.
    """

    remote_base_url: str
    realm: str
    client_id: str
    client_secret: SecretStr = field(repr=False)
    skip_certificate_validation: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "remote_base_url", self.remote_base_url.rstrip("/"))
        if not isinstance(self.client_secret, SecretStr):
            object.__setattr__(self, "client_secret", SecretStr(self.client_secret))

    @classmethod
    def from_properties(cls, properties: Mapping[str, PropertyValue]) -> "FederationConfig":
        """Build a config from a flat, possibly multi-valued property map.

        Args:
            properties: Option name to value (or list of values)

        Returns:
            Federation configuration

        Raises:
            ConfigurationError: If a required option is missing
        """
        skip = _first(properties, CONFIG_KEYCLOAK_SKIP_CERTIFICATE_VALIDATION) or "false"
        return cls(
            remote_base_url=_required(properties, CONFIG_KEYCLOAK_URL),
            realm=_required(properties, CONFIG_KEYCLOAK_REALM),
            client_id=_required(properties, CONFIG_KEYCLOAK_CLIENT_ID),
            client_secret=SecretStr(_required(properties, CONFIG_KEYCLOAK_CLIENT_SECRET)),
            skip_certificate_validation=skip.strip().lower() == "true",
        )

    def validate(self) -> None:
        """Check that the remote URL is an absolute http(s) URI.

        Raises:
            ConfigurationError: If the URL does not parse as an absolute URI
        """
        if any(c.isspace() for c in self.remote_base_url):
            raise ConfigurationError("invalid url", option=CONFIG_KEYCLOAK_URL)

        try:
            parts = urlsplit(self.remote_base_url)
            parts.port  # raises on a non-numeric or out-of-range port
        except ValueError as e:
            raise ConfigurationError("invalid url", option=CONFIG_KEYCLOAK_URL) from e

        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ConfigurationError("invalid url", option=CONFIG_KEYCLOAK_URL)
        if not _HOST_PATTERN.match(parts.hostname):
            raise ConfigurationError("invalid url", option=CONFIG_KEYCLOAK_URL)

    @property
    def token_path(self) -> str:
        return f"/realms/{self.realm}/protocol/openid-connect/token"

    @property
    def admin_users_path(self) -> str:
        return f"/admin/realms/{self.realm}/users"

    def to_safe_dict(self) -> dict[str, Any]:
        """Configuration summary without the client secret."""
        return {
            "remote_base_url": self.remote_base_url,
            "realm": self.realm,
            "client_id": self.client_id,
            "skip_certificate_validation": self.skip_certificate_validation,
        }
