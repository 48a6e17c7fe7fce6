"""Comment routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Path, Response, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from logus.application.usecase.comment import (
    CommentNodeResponse,
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from logus.domain.error import (
    IntegrityViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from logus.domain.service import JWTService

router = APIRouter(prefix="/api", tags=["comments"], route_class=DishkaRoute)

# Ids are PostgreSQL INTEGER columns
MAX_ID = 2**31 - 1

ArticleIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
CommentIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str = Field(min_length=1, max_length=10000)
    # Parent comment ID for replies
    parent_id: int | None = Field(default=None, ge=1, le=MAX_ID)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


@router.get(
    "/articles/{article_id}/comments",
    response_model=list[CommentNodeResponse],
)
async def get_comments(
    article_id: ArticleIdPath,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> Response:
    """Get the threaded comments of an article.

    Returns root comments oldest first; every node embeds its author and,
    when it has any, its replies. Leaf comments carry no ``replies`` key.
    The number of comments in the whole thread is sent in ``X-Total-Count``.

    Args:
        article_id: Article ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Comment forest as pre-rendered JSON
    """
    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(article_id=article_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except IntegrityViolationError as e:
        logfire.error(
            "Comment thread integrity violation",
            article_id=article_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Comment thread is corrupted",
        )
    return Response(
        content=result.comments_json,
        media_type="application/json",
        headers={"X-Total-Count": str(result.total)},
    )


@router.post(
    "/articles/{article_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: ArticleIdPath,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Comment on an article or reply to another comment.

    Requires authentication.

    Args:
        article_id: Article ID
        request: Comment content and optional parent ID
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment (flat)

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to comment",
        )

    try:
        use_case_request = CreateCommentRequest(
            article_id=article_id,
            author_id=user_id,
            content=request.content,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except IntegrityViolationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: CommentIdPath,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete a comment and all of its replies.

    Only the comment author can delete.

    Args:
        comment_id: Comment ID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Confirmation message

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except IntegrityViolationError as e:
        logfire.error("Comment delete aborted", comment_id=comment_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )

    return MessageResponse(message="Comment deleted successfully")
