"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from logus.domain.model import Comment, CommentDraft
from logus.domain.repository import CommentRepository
from logus.domain.value import ArticleId, CommentId
from logus.persistence.mappers import comment_to_dict, draft_to_dict, row_to_comment
from logus.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(self, draft: CommentDraft) -> Comment:
        """Insert a new comment; id and created_at come from the database."""
        stmt = (
            comments_table.insert()
            .values(**draft_to_dict(draft))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (insert or update by id)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
