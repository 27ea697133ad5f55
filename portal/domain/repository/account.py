"""Account repository interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from portal.domain.model.account import Account
from portal.domain.value import AccountId, ClassInstanceId


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def add_points(self, account_id: AccountId, delta: Decimal) -> Optional[Decimal]:
        """Atomically add a (possibly negative) delta to an account's balance.

        Args:
            account_id: The account's unique identifier
            delta: Signed points delta

        Returns:
            The new balance, or None if the account does not exist
        """
        pass

    @abstractmethod
    async def find_top_by_class_instance(
        self, class_instance_id: ClassInstanceId, limit: int
    ) -> list[Account]:
        """Find the highest-balance accounts in a class instance.

        Args:
            class_instance_id: The class instance
            limit: Maximum number of accounts to return

        Returns:
            Accounts ordered by points descending, then by join date
        """
        pass

    @abstractmethod
    async def count_ahead_in_class_instance(
        self, class_instance_id: ClassInstanceId, points: Decimal
    ) -> int:
        """Count accounts in a class instance with strictly more points.

        Args:
            class_instance_id: The class instance
            points: Balance to compare against

        Returns:
            Number of accounts ranked ahead of that balance
        """
        pass
