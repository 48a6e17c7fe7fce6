"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from logus.domain.model.article import Article
from logus.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity (read access for comment threads)."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass
