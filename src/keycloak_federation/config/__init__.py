"""Configuration for keycloak-federation."""

from .settings import FederationSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity, setup_logging

__all__ = [
    "FederationSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
]
