"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from logus.domain.model import Article, Comment, CommentDraft, User
from logus.domain.value import ArticleId, CommentId, UserId, UserRole


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        password=row["password"],
        name=row["name"],
        email=row["email"],
        role=UserRole(row["role"]),
        bio=row.get("bio"),
        avatar=row.get("avatar"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username,
        "password": user.password,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "bio": user.bio,
        "avatar": user.avatar,
        "created_at": user.created_at,
    }


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(row["id"]),
        title=row["title"],
        author_id=UserId(row["author_id"]),
        published=row["published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return {
        "id": article.id,
        "title": article.title,
        "author_id": article.author_id,
        "published": article.published,
        "created_at": article.created_at,
        "updated_at": article.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        article_id=ArticleId(row["article_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "article_id": comment.article_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "parent_id": comment.parent_id,
        "created_at": comment.created_at,
    }


def draft_to_dict(draft: CommentDraft) -> Dict[str, Any]:
    """Convert CommentDraft to an insert dict (id and created_at from the database)."""
    return {
        "article_id": draft.article_id,
        "author_id": draft.author_id,
        "content": draft.content,
        "parent_id": draft.parent_id,
    }
