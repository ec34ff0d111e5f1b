"""Federation application layer."""

from .federation_bridge import FederationBridge

__all__ = [
    "FederationBridge",
]
