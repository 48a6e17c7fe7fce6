"""Comment domain service."""

import logfire

from logus.domain.error import (
    CommentCycleError,
    IntegrityViolationError,
    NotFoundError,
)
from logus.domain.model import Comment, CommentDraft
from logus.domain.repository import CommentRepository
from logus.domain.value import ArticleId, CommentId, UserId

from .base import Service
from .comment_tree import CommentNode, CommentTreeBuilder
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, user_service: UserService
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_service: User service for author projections
        """
        self.comment_repository = comment_repository
        self.user_service = user_service

    async def create_comment(
        self,
        article_id: ArticleId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        Args:
            article_id: Article ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with identity and timestamp assigned by the store

        Raises:
            NotFoundError: If the parent comment does not exist
            IntegrityViolationError: If the parent belongs to another article
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=article_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            # Build the draft first so invalid content never reaches the store
            draft = CommentDraft(
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
            )

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        article_id=article_id,
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.article_id != article_id:
                    logfire.error(
                        "Parent comment does not belong to article",
                        parent_id=parent_id,
                        parent_article_id=parent.article_id,
                        target_article_id=article_id,
                    )
                    raise IntegrityViolationError(
                        "Parent comment does not belong to this article"
                    )

            saved = await self.comment_repository.create(draft)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                article_id=article_id,
                author_id=author_id,
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments_for_article(self, article_id: ArticleId) -> list[Comment]:
        """Get all comments for an article as a flat, chronological list.

        Args:
            article_id: Article ID

        Returns:
            Comments ordered oldest first
        """
        with logfire.span(
            "comment_service.get_comments_for_article", article_id=article_id
        ):
            comments = await self.comment_repository.find_by_article(article_id)
            logfire.info(
                "Comments retrieved for article",
                article_id=article_id,
                count=len(comments),
            )
            return comments

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Get the reply forest for an article with authors attached.

        Authors are resolved in one batched lookup before the tree is
        assembled, so the number of queries does not grow with the number of
        comments.

        Args:
            article_id: Article ID

        Returns:
            Root comment nodes in chronological order

        Raises:
            IntegrityViolationError: If the stored thread is malformed or a
                comment's author no longer exists
        """
        with logfire.span("comment_service.get_comment_tree", article_id=article_id):
            comments = await self.get_comments_for_article(article_id)
            authors = await self.user_service.project_authors(
                comment.author_id for comment in comments
            )
            roots = CommentTreeBuilder(authors).build(comments)
            logfire.info(
                "Comment tree built",
                article_id=article_id,
                root_count=len(roots),
                comment_count=len(comments),
            )
            return roots

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment together with all of its replies.

        The subtree is collected first, then deleted replies-first so that no
        row is removed before the rows referencing it. All deletes run on the
        caller's unit of work, so the request transaction makes the cascade
        all-or-nothing.

        Args:
            comment_id: Comment ID

        Returns:
            True if the comment existed and was deleted, False otherwise

        Raises:
            CommentCycleError: If the reply chain loops back on itself
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            root = await self.comment_repository.find_by_id(comment_id)
            if not root:
                logfire.warn("Comment not found for deletion", comment_id=comment_id)
                return False

            doomed = await self._collect_subtree(root)
            # Reverse pre-order puts every reply before its parent
            for doomed_id in reversed(doomed):
                await self.comment_repository.delete(doomed_id)

            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                article_id=root.article_id,
                replies_deleted=len(doomed) - 1,
            )
            return True

    async def _collect_subtree(self, root: Comment) -> list[CommentId]:
        """List a comment and all its descendants in pre-order.

        Raises:
            CommentCycleError: If a comment is reached twice
        """
        order: list[CommentId] = []
        visited: set[CommentId] = set()
        stack: list[Comment] = [root]
        while stack:
            comment = stack.pop()
            if comment.id in visited:
                logfire.error(
                    "Comment parent cycle detected during deletion",
                    comment_id=comment.id,
                    root_id=root.id,
                )
                raise CommentCycleError([root.id, comment.id])
            visited.add(comment.id)
            order.append(comment.id)
            children = await self.comment_repository.find_children(comment.id)
            stack.extend(reversed(children))
        return order
