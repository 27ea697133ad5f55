"""PostgreSQL implementation of Reaction repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Reaction
from portal.domain.repository import ReactionRepository
from portal.domain.value import AccountId, ContentId
from portal.persistence.mappers import reaction_to_dict, row_to_reaction
from portal.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository.

    Each write is a single conditional statement; the affected row count
    tells whether the compare-and-swap won.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, content_id: ContentId, account_id: AccountId):
        return and_(
            reactions_table.c.content_id == content_id,
            reactions_table.c.account_id == account_id,
        )

    async def find(
        self, content_id: ContentId, account_id: AccountId
    ) -> Optional[Reaction]:
        """Find an account's reaction on a content item."""
        stmt = select(reactions_table).where(self._pair(content_id, account_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reaction(dict(row)) if row else None

    async def find_by_account_and_contents(
        self, account_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Reaction]:
        """Find an account's reactions on several content items (batch query)."""
        if not content_ids:
            return []

        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.account_id == account_id,
                reactions_table.c.content_id.in_(content_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(dict(row)) for row in result.mappings().all()]

    async def insert_if_absent(self, reaction: Reaction) -> bool:
        """INSERT ... ON CONFLICT DO NOTHING on the (content, account) key."""
        stmt = (
            insert(reactions_table)
            .values(**reaction_to_dict(reaction))
            .on_conflict_do_nothing(index_elements=["content_id", "account_id"])
            .returning(reactions_table.c.version)
        )
        result = await self.session.execute(stmt)
        inserted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return inserted

    async def update_if_version(self, reaction: Reaction, expected_version: int) -> bool:
        """UPDATE guarded by the version read earlier."""
        stmt = (
            reactions_table.update()
            .where(self._pair(reaction.content_id, reaction.account_id))
            .where(reactions_table.c.version == expected_version)
            .values(
                kind=reaction.kind.value,
                version=reaction.version,
                updated_at=reaction.updated_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def delete_if_version(
        self, content_id: ContentId, account_id: AccountId, expected_version: int
    ) -> bool:
        """DELETE guarded by the version read earlier."""
        stmt = (
            delete(reactions_table)
            .where(self._pair(content_id, account_id))
            .where(reactions_table.c.version == expected_version)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]
