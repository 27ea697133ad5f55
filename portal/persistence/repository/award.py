"""PostgreSQL implementation of Award event repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import AwardEvent
from portal.domain.repository import AwardRepository
from portal.persistence.mappers import award_event_to_dict, row_to_award_event
from portal.persistence.tables import award_events_table


class PostgresAwardRepository(AwardRepository):
    """PostgreSQL implementation of AwardRepository.

    The unique constraint on ``event_key`` decides which of two concurrent
    recordings of the same event wins.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_event_key(self, event_key: str) -> Optional[AwardEvent]:
        """Find the award applied for an event key."""
        stmt = select(award_events_table).where(
            award_events_table.c.event_key == event_key
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_award_event(dict(row)) if row else None

    async def record(self, event: AwardEvent) -> bool:
        """INSERT ... ON CONFLICT (event_key) DO NOTHING."""
        stmt = (
            insert(award_events_table)
            .values(**award_event_to_dict(event))
            .on_conflict_do_nothing(index_elements=["event_key"])
            .returning(award_events_table.c.id)
        )
        result = await self.session.execute(stmt)
        recorded = result.scalar_one_or_none() is not None
        await self.session.flush()
        return recorded
