"""User domain service."""

from collections.abc import Iterable

import logfire

from logus.domain.error import NotFoundError
from logus.domain.model import AuthorView, User
from logus.domain.repository import UserRepository
from logus.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and author projection."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=user_id, username=user.username)
            return user

    async def project_author(self, user_id: UserId) -> AuthorView:
        """Get the credential-free projection of a user.

        Args:
            user_id: User ID

        Returns:
            Author projection of the user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.project_author", user_id=user_id):
            user = await self.get_by_id(user_id)
            return AuthorView.from_user(user)

    async def project_authors(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, AuthorView]:
        """Resolve author projections for many users with a single lookup.

        Ids that do not resolve are left out of the result; deciding whether
        that is an error belongs to the caller.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to author projection
        """
        distinct_ids = set(user_ids)
        with logfire.span("user_service.project_authors", requested=len(distinct_ids)):
            if not distinct_ids:
                return {}
            users = await self.user_repository.find_by_ids(distinct_ids)
            authors = {user.id: AuthorView.from_user(user) for user in users}
            missing = distinct_ids - authors.keys()
            if missing:
                logfire.warn("Authors not found", user_ids=sorted(missing))
            logfire.info("Authors resolved", count=len(authors))
            return authors
