"""This module re-exports the User model from the database package and
defines the user/token shapes that leave the auth service.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from database.models import User


class TokenClaims(BaseModel):
    id: int
    email: str
    role: str

    @classmethod
    def for_user(cls, user: User) -> "TokenClaims":
        return cls(id=user.id, email=user.email, role=user.role)


class PublicUser(BaseModel):
    """The only user representation ever returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


__all__ = ["PublicUser", "TokenClaims", "User"]
