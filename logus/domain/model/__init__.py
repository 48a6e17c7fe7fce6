"""Domain model entities for Logus."""

from logus.domain.model.article import Article
from logus.domain.model.comment import Comment, CommentDraft
from logus.domain.model.user import AuthorView, User

__all__ = [
    "User",
    "AuthorView",
    "Article",
    "Comment",
    "CommentDraft",
]
