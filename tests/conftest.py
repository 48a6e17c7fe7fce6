"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from logus.domain.model import Article, Comment, User
from logus.domain.value import ArticleId, CommentId, UserId, UserRole

# Keep spans local: no token, nothing printed
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def make_user(user_id: int, username: str | None = None) -> User:
    """Helper to build a user with plausible defaults."""
    username = username or f"user{user_id}"
    return User(
        id=UserId(user_id),
        username=username,
        password=f"hash-{user_id}",
        name=username.title(),
        email=f"{username}@logus.blog",
        role=UserRole.USER,
        created_at=BASE_TIME,
    )


def make_article(article_id: int = 1, author_id: int = 1) -> Article:
    """Helper to build a published article."""
    return Article(
        id=ArticleId(article_id),
        title=f"Article {article_id}",
        author_id=UserId(author_id),
        published=True,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_comment(
    comment_id: int,
    author_id: int = 1,
    parent_id: int | None = None,
    article_id: int = 1,
    minute: int | None = None,
) -> Comment:
    """Helper to build a stored comment.

    ``created_at`` defaults to ``comment_id`` minutes after BASE_TIME so ids
    and chronology agree unless a test says otherwise.
    """
    offset = comment_id if minute is None else minute
    return Comment(
        id=CommentId(comment_id),
        article_id=ArticleId(article_id),
        author_id=UserId(author_id),
        content=f"Comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=BASE_TIME + timedelta(minutes=offset),
    )
