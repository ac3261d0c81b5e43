"""
Pydantic models for user data.

``User`` is both the request body for create/update and the record
held by the store.  ``UserRead`` adds the generated identifier for
responses.  ``Envelope`` is the ``{error?, data?}`` envelope wrapped
around every JSON response.
"""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class User(BaseModel):
    """A user profile.

    Every field defaults to the empty string, so ``{}`` and ``null``
    are valid bodies and a ``null`` field reads as ``""``.  Keys other
    than the three below are ignored.
    """

    first_name: str = Field("", examples=["Ada"])
    last_name: str = Field("", examples=["Lovelace"])
    biography: str = Field("", examples=["mathematician"])

    @model_validator(mode="before")
    @classmethod
    def null_body(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("first_name", "last_name", "biography", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class UserRead(User):
    """Schema for reading a user from the API."""

    id: uuid.UUID

    @classmethod
    def from_record(cls, user_id: uuid.UUID, user: User) -> "UserRead":
        return cls(id=user_id, **user.model_dump())


class Envelope(BaseModel):
    """JSON envelope carrying either an ``error`` or a ``data`` payload."""

    error: Optional[str] = None
    data: Optional[Any] = None

    def render(self) -> dict:
        """Return the JSON‑ready dict with empty keys left out."""
        body = {}
        if self.error:
            body["error"] = self.error
        if self.data is not None:
            body["data"] = self.data
        return body
