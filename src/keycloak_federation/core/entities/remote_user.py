"""Remote user representation."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RemoteUser(BaseModel):
    """User representation returned by the remote admin API.

    Unknown fields are ignored. Transient: not retained beyond the call
    that produced it.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    attributes: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("attributes", mode="before")
    @classmethod
    def null_attributes_as_empty(cls, value: Any) -> Any:
        """The admin API sends ``null`` for users without custom attributes."""
        return {} if value is None else value
