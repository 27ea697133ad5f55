"""In-memory reaction repository for testing."""

from typing import Optional, Sequence

from portal.domain.model.reaction import Reaction
from portal.domain.repository.reaction import ReactionRepository
from portal.domain.value import AccountId, ContentId

from .base import InMemoryRepository


class InMemoryReactionRepository(InMemoryRepository, ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self) -> None:
        self._reactions: dict[tuple[ContentId, AccountId], Reaction] = {}

    async def find(
        self, content_id: ContentId, account_id: AccountId
    ) -> Optional[Reaction]:
        """Find an account's reaction on a content item."""
        return self._reactions.get((content_id, account_id))

    async def find_by_account_and_contents(
        self, account_id: AccountId, content_ids: Sequence[ContentId]
    ) -> list[Reaction]:
        """Find an account's reactions on several content items."""
        wanted = set(content_ids)
        return [
            r
            for r in self._reactions.values()
            if r.account_id == account_id and r.content_id in wanted
        ]

    async def insert_if_absent(self, reaction: Reaction) -> bool:
        """Insert unless the pair already has a reaction."""
        key = (reaction.content_id, reaction.account_id)
        if key in self._reactions:
            return False
        self._put(self._reactions, key, reaction)
        return True

    async def update_if_version(self, reaction: Reaction, expected_version: int) -> bool:
        """Replace if the stored version matches."""
        key = (reaction.content_id, reaction.account_id)
        current = self._reactions.get(key)
        if current is None or current.version != expected_version:
            return False
        self._put(self._reactions, key, reaction)
        return True

    async def delete_if_version(
        self, content_id: ContentId, account_id: AccountId, expected_version: int
    ) -> bool:
        """Delete if the stored version matches."""
        current = self._reactions.get((content_id, account_id))
        if current is None or current.version != expected_version:
            return False
        self._remove(self._reactions, (content_id, account_id))
        return True
