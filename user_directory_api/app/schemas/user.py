"""
Pydantic models for user records.

Attributes use Python names while the JSON representation keeps the
camelCase keys clients send and expect (``firstName``, ``lastName``).
Both spellings are accepted on input.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    model_config = {
        "populate_by_name": True,
    }


class UserPayload(UserBase):
    """Request body for creating or updating a user.

    Every field is optional at the schema level.  Creation requires all
    three to be non‑empty and update requires at least one; those checks
    are done by the route validation and the store, which report them
    with the service's own error messages.
    """

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Anshika"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Agarwal"])
    hobby: Optional[str] = Field(None, examples=["Teaching"])


class User(UserBase):
    """A stored user record as returned by the API."""

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    hobby: str
