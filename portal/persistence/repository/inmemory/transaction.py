"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from portal.domain.repository.transaction import TransactionManager

from .base import Undo, current_unit


class InMemoryTransactionManager(TransactionManager):
    """Rolls a failed unit back by replaying its own undo log in reverse.

    Any BaseException rolls back, so a cancelled task leaves nothing behind
    either. A nested unit that succeeds hands its undos to the enclosing
    unit; one that fails undoes only its own writes.
    """

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block all-or-nothing."""
        parent = current_unit.get()
        unit: list[Undo] = []
        token = current_unit.set(unit)
        try:
            yield
        except BaseException:
            for undo in reversed(unit):
                undo()
            raise
        finally:
            current_unit.reset(token)

        if parent is not None:
            parent.extend(unit)
