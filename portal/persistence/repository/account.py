"""PostgreSQL implementation of Account repository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Account
from portal.domain.repository import AccountRepository
from portal.domain.value import AccountId, ClassInstanceId
from portal.persistence.mappers import account_to_dict, row_to_account
from portal.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save(self, account: Account) -> Account:
        """Save an account (create or update)."""
        existing = await self.find_by_id(account.id)
        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = accounts_table.insert().values(**account_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return account

    async def add_points(self, account_id: AccountId, delta: Decimal) -> Optional[Decimal]:
        """Atomically add a delta to the balance in a single UPDATE.

        The increment happens in SQL so concurrent awards to the same account
        never read-modify-write over each other.
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .values(
                points=accounts_table.c.points + delta,
                updated_at=func.now(),
            )
            .returning(accounts_table.c.points)
        )
        result = await self.session.execute(stmt)
        balance = result.scalar_one_or_none()
        await self.session.flush()
        return Decimal(balance) if balance is not None else None

    async def find_top_by_class_instance(
        self, class_instance_id: ClassInstanceId, limit: int
    ) -> list[Account]:
        """Find the highest-balance accounts in a class instance."""
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.class_instance_id == class_instance_id)
            .order_by(accounts_table.c.points.desc(), accounts_table.c.created_at.asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings().all()]

    async def count_ahead_in_class_instance(
        self, class_instance_id: ClassInstanceId, points: Decimal
    ) -> int:
        """Count accounts in a class instance with strictly more points."""
        stmt = (
            select(func.count())
            .select_from(accounts_table)
            .where(accounts_table.c.class_instance_id == class_instance_id)
            .where(accounts_table.c.points > points)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
