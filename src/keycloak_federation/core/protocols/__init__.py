"""Federation protocol contracts.

Capability interfaces the bridge exposes to the host, and the contract
it expects from the host's local storage.
"""

from .user_resolver import UserResolver
from .credential_validator import CredentialValidator
from .credential_availability_checker import CredentialAvailabilityChecker
from .user_storage import UserStorage

__all__ = [
    "UserResolver",
    "CredentialValidator",
    "CredentialAvailabilityChecker",
    "UserStorage",
]
