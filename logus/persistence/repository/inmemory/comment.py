"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from itertools import count
from typing import Optional

from logus.domain.model.comment import Comment, CommentDraft
from logus.domain.repository.comment import CommentRepository
from logus.domain.value import ArticleId, CommentId


def _chronological(comment: Comment) -> tuple[datetime, int]:
    return (comment.created_at, comment.id)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments for an article, oldest first."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        comments.sort(key=_chronological)
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=_chronological)
        return comments

    async def create(self, draft: CommentDraft) -> Comment:
        """Assign the next id and the current time, then store."""
        comment_id = CommentId(next(self._ids))
        while comment_id in self._comments:
            comment_id = CommentId(next(self._ids))

        comment = Comment(
            id=comment_id,
            created_at=datetime.now(timezone.utc),
            **draft.model_dump(),
        )
        self._comments[comment.id] = comment
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Save or replace a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article."""
        return sum(1 for c in self._comments.values() if c.article_id == article_id)
