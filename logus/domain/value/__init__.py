"""Domain value objects for Logus."""

from logus.domain.value.identifiers import ArticleId, CommentId, UserId
from logus.domain.value.types import UserRole

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "UserRole",
]
