"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import List, Optional

from logus.domain.model.user import User
from logus.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users in one lookup.

        Ids that do not resolve are skipped; no error is raised.

        Args:
            user_ids: User identifiers (duplicates allowed)

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
