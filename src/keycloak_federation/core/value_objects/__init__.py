"""Federation value objects."""

from .cached_token import CachedToken
from .credential_query import CredentialQuery, CredentialType
from .remote_user_id import RemoteUserId

__all__ = [
    "CachedToken",
    "CredentialQuery",
    "CredentialType",
    "RemoteUserId",
]
