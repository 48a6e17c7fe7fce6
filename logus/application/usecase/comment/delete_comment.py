"""Delete comment use case."""

from pydantic import BaseModel

from logus.application.usecase.base import BaseUseCase
from logus.domain.error import NotAuthorizedError, NotFoundError
from logus.domain.service import CommentService
from logus.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Only the author may delete a comment; replies by other users are
        removed with it.

        Args:
            request: Delete comment request

        Returns:
            Deletion result

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
        """
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))

        deleted = await self.comment_service.delete_comment(comment_id)
        if not deleted:
            # Removed by a concurrent request after the lookup above
            raise NotFoundError("Comment", str(comment_id))

        return DeleteCommentResponse(comment_id=comment_id, deleted=deleted)
