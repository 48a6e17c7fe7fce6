"""PostgreSQL repository implementations."""

from logus.persistence.repository.article import PostgresArticleRepository
from logus.persistence.repository.comment import PostgresCommentRepository
from logus.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresArticleRepository",
    "PostgresCommentRepository",
]
