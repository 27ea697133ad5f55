"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from portal.domain.model.reaction import Reaction
from portal.domain.value import AccountId, ContentId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Writes are compare-and-swap operations keyed on the reaction's version,
    so a stale read can never overwrite a concurrent change.
    """

    @abstractmethod
    async def find(
        self, content_id: ContentId, account_id: AccountId
    ) -> Optional[Reaction]:
        """Find an account's reaction on a content item.

        Args:
            content_id: The content item's ID
            account_id: The reacting account's ID

        Returns:
            The reaction if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_account_and_contents(
        self, account_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Reaction]:
        """Find an account's reactions on several content items (batch query).

        Args:
            account_id: The reacting account's ID
            content_ids: Content items to check

        Returns:
            Reactions by the account on the specified items
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, reaction: Reaction) -> bool:
        """Insert a reaction unless one already exists for the pair.

        Args:
            reaction: The new reaction (version 1)

        Returns:
            True if inserted, False if a reaction already existed
        """
        pass

    @abstractmethod
    async def update_if_version(self, reaction: Reaction, expected_version: int) -> bool:
        """Replace a reaction if its stored version still matches.

        Args:
            reaction: The reaction with its new kind and bumped version
            expected_version: Version read before computing the change

        Returns:
            True if updated, False if the row changed or disappeared
        """
        pass

    @abstractmethod
    async def delete_if_version(
        self, content_id: ContentId, account_id: AccountId, expected_version: int
    ) -> bool:
        """Delete a reaction if its stored version still matches.

        Args:
            content_id: The content item's ID
            account_id: The reacting account's ID
            expected_version: Version read before computing the change

        Returns:
            True if deleted, False if the row changed or disappeared
        """
        pass
