"""User aggregate root and its public author projection."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from logus.domain.model.common import DomainModel
from logus.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    ``password`` holds the credential hash and must never leave the service;
    use ``AuthorView`` when embedding a user in a payload.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    password: str
    name: str
    email: str
    role: UserRole = UserRole.USER
    bio: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class AuthorView(DomainModel):
    """Credential-free projection of a User, safe for comment payloads."""

    id: UserId
    username: str
    name: str
    email: str
    role: UserRole
    bio: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "AuthorView":
        """Project a user onto its public fields."""
        return cls.model_validate(user.model_dump(exclude={"password"}))
