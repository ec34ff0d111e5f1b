"""Stateful federation repositories."""

from .token_cache import TokenCache
from .memory_user_storage import InMemoryUserStorage

__all__ = [
    "TokenCache",
    "InMemoryUserStorage",
]
