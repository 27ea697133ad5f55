"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Comment
from portal.domain.repository import CommentRepository
from portal.domain.value import AccountId, CommentId, ContentId
from portal.persistence.mappers import comment_to_dict, row_to_comment
from portal.persistence.tables import comments_table


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
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> list[Comment]:
        """Find comments on a content item, newest first."""
        stmt = select(comments_table).where(comments_table.c.content_id == content_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        stmt = stmt.order_by(comments_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Set deleted_at on a live comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def count_by_author(self, author_id: AccountId) -> int:
        """Count an account's live comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
