"""Remote user identifier value object."""

from dataclasses import dataclass
from urllib.parse import quote

ID_SEPARATOR = ":"

# Dot segments are collapsed by URL normalization and would address another resource
_DOT_SEGMENTS = frozenset({".", ".."})


@dataclass(frozen=True)
class RemoteUserId:
    """Identifier of a user in the remote directory.

    Hosts hand out prefixed ids such as ``"<provider-id>:<remote-id>"``;
    only the part after the last separator names the remote user.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Remote user id cannot be empty")
        if self.value in _DOT_SEGMENTS:
            raise ValueError(f"Remote user id cannot be {self.value!r}")

    @classmethod
    def from_external(cls, raw_id: str) -> "RemoteUserId":
        """Strip any host prefix from ``raw_id``."""
        return cls(raw_id.rsplit(ID_SEPARATOR, 1)[-1])

    @property
    def path_segment(self) -> str:
        """The id percent-encoded as exactly one URL path segment."""
        return quote(self.value, safe="")

    def __str__(self) -> str:
        return self.value
