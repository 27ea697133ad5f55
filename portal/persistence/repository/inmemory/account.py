"""In-memory account repository for testing."""

from decimal import Decimal
from typing import Optional

from portal.domain.model.account import Account
from portal.domain.repository.account import AccountRepository
from portal.domain.value import AccountId, ClassInstanceId

from .base import InMemoryRepository


class InMemoryAccountRepository(InMemoryRepository, AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def save(self, account: Account) -> Account:
        """Save an account."""
        self._put(self._accounts, account.id, account)
        return account

    async def add_points(self, account_id: AccountId, delta: Decimal) -> Optional[Decimal]:
        """Add a delta to the balance."""
        updated = self._shift_points(account_id, delta)
        if updated is None:
            return None
        self._journal(lambda: self._shift_points(account_id, -delta))
        return updated.points

    async def find_top_by_class_instance(
        self, class_instance_id: ClassInstanceId, limit: int
    ) -> list[Account]:
        """Find the highest-balance accounts in a class instance."""
        members = [
            a for a in self._accounts.values() if a.class_instance_id == class_instance_id
        ]
        members.sort(key=lambda a: (-a.points, a.created_at))
        return members[:limit]

    async def count_ahead_in_class_instance(
        self, class_instance_id: ClassInstanceId, points: Decimal
    ) -> int:
        """Count accounts in a class instance with strictly more points."""
        return sum(
            1
            for a in self._accounts.values()
            if a.class_instance_id == class_instance_id and a.points > points
        )

    def _shift_points(self, account_id: AccountId, delta: Decimal) -> Optional[Account]:
        account = self._accounts.get(account_id)
        if not account:
            return None
        updated = account.model_copy(update={"points": account.points + delta})
        self._accounts[account_id] = updated
        return updated
