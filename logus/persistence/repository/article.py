"""PostgreSQL implementation of Article repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from logus.domain.model import Article
from logus.domain.repository import ArticleRepository
from logus.domain.value import ArticleId
from logus.persistence.mappers import article_to_dict, row_to_article
from logus.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        article_dict = article_to_dict(article)
        if await self.find_by_id(article.id):
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return article
