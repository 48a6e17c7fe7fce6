"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .schema import (
    AuthorResponse,
    CommentNodeResponse,
    CommentResponse,
    CommentWithAuthorResponse,
    render_comment_forest,
)

__all__ = [
    "AuthorResponse",
    "CommentNodeResponse",
    "CommentResponse",
    "CommentWithAuthorResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "render_comment_forest",
]
