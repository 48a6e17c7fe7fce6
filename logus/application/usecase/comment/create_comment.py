"""Create comment use case."""

from pydantic import BaseModel

from logus.application.usecase.base import BaseUseCase
from logus.domain.error import NotFoundError
from logus.domain.repository import ArticleRepository
from logus.domain.service import CommentService, UserService
from logus.domain.value import ArticleId, CommentId, UserId

from .schema import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: int
    author_id: int  # User ID from authenticated user
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            article_repository: Article repository for existence checks
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.article_repository = article_repository

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify article exists
        2. Verify the author exists
        3. Create comment via comment service (validates parent if replying)

        Args:
            request: Create comment request

        Returns:
            The created comment (flat, without author or replies)

        Raises:
            NotFoundError: If article, author or parent comment not found
            IntegrityViolationError: If the parent belongs to another article
        """
        article_id = ArticleId(request.article_id)

        article = await self.article_repository.find_by_id(article_id)
        if not article:
            raise NotFoundError("Article", str(article_id))

        author = await self.user_service.get_by_id(UserId(request.author_id))

        comment = await self.comment_service.create_comment(
            article_id=article_id,
            author_id=author.id,
            content=request.content,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        return CommentResponse.from_domain(comment)
