"""In-memory article repository for testing."""

from typing import Optional

from logus.domain.model.article import Article
from logus.domain.repository.article import ArticleRepository
from logus.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article
