"""Comment entity.

Comments are threaded discussions on articles with unlimited depth.
Threading is expressed only through ``parent_id``; the reply tree is
materialized at read time by ``CommentTreeBuilder``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from logus.domain.model.common import DomainModel
from logus.domain.value import ArticleId, CommentId, UserId


class CommentDraft(DomainModel):
    """A comment that has not been persisted yet.

    The store assigns ``id`` and ``created_at`` when the draft is created.
    """

    article_id: ArticleId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None

    @field_validator("content")
    @classmethod
    def validate_content_not_blank(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("Comment content must not be blank")
        return v


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.

    - parent_id: Direct parent comment (None for top-level)
    - created_at: Sort key among siblings (ascending)
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None
