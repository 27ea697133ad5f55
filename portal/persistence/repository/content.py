"""PostgreSQL implementation of Content repository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import ContentItem
from portal.domain.repository import ContentRepository
from portal.domain.value import AccountId, ContentId, ContentType
from portal.persistence.mappers import content_to_dict, row_to_content
from portal.persistence.tables import contents_table


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: ContentId) -> Optional[ContentItem]:
        """Find a content item by ID."""
        stmt = select(contents_table).where(contents_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_content(dict(row)) if row else None

    async def save(self, content: ContentItem) -> ContentItem:
        """Save a content item (create or update)."""
        existing = await self.find_by_id(content.id)
        content_dict = content_to_dict(content)

        if existing:
            stmt = (
                contents_table.update()
                .where(contents_table.c.id == content.id)
                .values(**content_dict)
            )
        else:
            stmt = contents_table.insert().values(**content_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return content

    async def adjust_counters(
        self,
        content_id: ContentId,
        *,
        like_delta: int = 0,
        dislike_delta: int = 0,
        comment_delta: int = 0,
        points_delta: Decimal = Decimal("0"),
    ) -> Optional[ContentItem]:
        """Adjust all counters in one UPDATE ... RETURNING."""
        stmt = (
            contents_table.update()
            .where(contents_table.c.id == content_id)
            .values(
                like_count=contents_table.c.like_count + like_delta,
                dislike_count=contents_table.c.dislike_count + dislike_delta,
                comment_count=contents_table.c.comment_count + comment_delta,
                points_earned=contents_table.c.points_earned + points_delta,
            )
            .returning(*contents_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_content(dict(row)) if row else None

    async def count_by_owner_and_type(
        self, owner_id: AccountId
    ) -> dict[ContentType, int]:
        """Count uploads per content type with one GROUP BY."""
        stmt = (
            select(contents_table.c.content_type, func.count())
            .where(contents_table.c.owner_id == owner_id)
            .group_by(contents_table.c.content_type)
        )
        result = await self.session.execute(stmt)
        counts = {ContentType(content_type): count for content_type, count in result.all()}
        return {content_type: counts.get(content_type, 0) for content_type in ContentType}
