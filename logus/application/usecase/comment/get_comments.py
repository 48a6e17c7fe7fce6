"""Get comments use case."""

from pydantic import BaseModel

from logus.application.usecase.base import BaseUseCase
from logus.domain.error import NotFoundError
from logus.domain.repository import ArticleRepository
from logus.domain.service import CommentService
from logus.domain.value import ArticleId

from .schema import render_comment_forest


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response.

    ``comments_json`` is the rendered forest (a JSON array), ready to send.
    """

    article_id: int
    comments_json: str
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting the threaded comments of an article."""

    def __init__(
        self,
        comment_service: CommentService,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            article_repository: Article repository for existence checks
        """
        self.comment_service = comment_service
        self.article_repository = article_repository

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Verify the article exists
        2. Build the reply forest (authors attached) via comment service
        3. Convert to response models

        Args:
            request: Get comments request with article ID

        Returns:
            Root comments, oldest first, with nested replies, and the total
            number of comments in the thread

        Raises:
            NotFoundError: If the article does not exist
            IntegrityViolationError: If the stored thread is malformed
        """
        article_id = ArticleId(request.article_id)

        article = await self.article_repository.find_by_id(article_id)
        if not article:
            raise NotFoundError("Article", str(article_id))

        roots = await self.comment_service.get_comment_tree(article_id)

        return GetCommentsResponse(
            article_id=article_id,
            comments_json=render_comment_forest(roots),
            total=sum(root.count() for root in roots),
        )
