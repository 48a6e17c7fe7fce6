"""Repository interfaces for Logus domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from logus.domain.repository.article import ArticleRepository
from logus.domain.repository.comment import CommentRepository
from logus.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ArticleRepository",
    "CommentRepository",
]
