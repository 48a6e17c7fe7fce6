"""In-memory user repository for testing."""

from collections.abc import Iterable
from typing import Optional

from logus.domain.model.user import User
from logus.domain.repository.user import UserRepository
from logus.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self.lookups = 0  # Number of find_* calls, for batching assertions

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        self.lookups += 1
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users at once."""
        self.lookups += 1
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
