"""Adapters to remote systems."""

from .remote_directory import RemoteDirectory

__all__ = [
    "RemoteDirectory",
]
