"""Credential query value objects."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import SecretStr


class CredentialType(str, Enum):
    """Credential types the bridge claims support for."""

    PASSWORD = "password"
    OTP_TOTP = "otp-totp"
    OTP_HOTP = "otp-hotp"

    @classmethod
    def parse(cls, value: str) -> Optional["CredentialType"]:
        """Return the matching type, or None for anything unsupported."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def remote_type(self) -> str:
        """Credential type name as listed by the remote credentials endpoint."""
        if self is CredentialType.PASSWORD:
            return "password"
        return "otp"

    @property
    def grant_parameter(self) -> str:
        """Form field carrying the challenge response in the direct grant."""
        if self is CredentialType.PASSWORD:
            return "password"
        return "totp"


@dataclass(frozen=True)
class CredentialQuery:
    """One credential presented for validation. Never persisted."""

    credential_type: CredentialType
    challenge_response: SecretStr = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.credential_type, CredentialType):
            object.__setattr__(self, "credential_type", CredentialType(self.credential_type))
        if not isinstance(self.challenge_response, SecretStr):
            object.__setattr__(self, "challenge_response", SecretStr(self.challenge_response))

    @classmethod
    def password(cls, value: str) -> "CredentialQuery":
        return cls(CredentialType.PASSWORD, SecretStr(value))
