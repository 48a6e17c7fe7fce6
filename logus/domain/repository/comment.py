"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from logus.domain.model.comment import Comment, CommentDraft
from logus.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article in chronological order.

        Comments are ordered by ``created_at`` ascending with ``id`` as the
        tie-breaker, which is the sibling order of the materialized tree.

        Args:
            article_id: The article ID

        Returns:
            Flat list of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def create(self, draft: CommentDraft) -> Comment:
        """Persist a new comment.

        The store assigns the identity and creation timestamp.

        Args:
            draft: The comment to create

        Returns:
            The persisted comment
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment with an existing identity (insert or replace).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete, no cascade).

        Callers are responsible for removing replies first.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article.

        Args:
            article_id: The article ID

        Returns:
            Number of comments
        """
        pass
