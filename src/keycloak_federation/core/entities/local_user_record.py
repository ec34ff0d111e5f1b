"""Locally mirrored user record entity."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .remote_user import RemoteUser


@dataclass
class LocalUserRecord:
    """Federated user mirrored in local storage, keyed by ``(realm, username)``.

    The local storage collaborator owns the record; the bridge only reads and
    writes fields on it.
    """

    realm: str
    username: str
    enabled: bool = False
    email_verified: bool = False
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    federation_link: Optional[str] = None
    external_id: Optional[str] = None
    attributes: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        return (self.realm, self.username)

    @property
    def is_federated(self) -> bool:
        return bool(self.external_id)

    def apply_remote(self, remote: RemoteUser, federation_link: str) -> None:
        """Overwrite mirrored fields from ``remote`` and merge its attributes."""
        self.enabled = True
        self.email_verified = True
        self.email = remote.email
        self.first_name = remote.first_name
        self.last_name = remote.last_name
        self.federation_link = federation_link
        self.external_id = remote.id
        for name, values in remote.attributes.items():
            self.attributes[name] = list(values)
