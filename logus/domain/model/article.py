"""Article entity.

Only the fields comment threads depend on are modelled here; article
authoring lives outside this service.
"""

from datetime import datetime

from pydantic import Field

from logus.domain.model.common import DomainModel
from logus.domain.value import ArticleId, UserId


class Article(DomainModel):
    """Article entity."""

    id: ArticleId
    title: str = Field(min_length=1)
    author_id: UserId
    published: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
