"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic units as SAVEPOINTs inside the request session.

    The request-scope provider owns the outer transaction and commits it
    when the request finishes; a failed unit rolls back to its savepoint
    and leaves earlier work in the request intact.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Open a savepoint and release or roll it back."""
        try:
            async with self.session.begin_nested():
                yield
        except BaseException as e:
            logfire.debug("Atomic unit rolled back", error_type=type(e).__name__)
            raise
