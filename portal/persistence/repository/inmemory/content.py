"""In-memory content repository for testing."""

from collections import Counter
from decimal import Decimal
from typing import Optional

from portal.domain.model.content import ContentItem
from portal.domain.repository.content import ContentRepository
from portal.domain.value import AccountId, ContentId, ContentType

from .base import InMemoryRepository


class InMemoryContentRepository(InMemoryRepository, ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self) -> None:
        self._contents: dict[ContentId, ContentItem] = {}

    async def find_by_id(self, content_id: ContentId) -> Optional[ContentItem]:
        """Find a content item by ID."""
        return self._contents.get(content_id)

    async def save(self, content: ContentItem) -> ContentItem:
        """Save a content item."""
        self._put(self._contents, content.id, content)
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
        """Adjust the item's counters."""
        updated = self._shift(
            content_id, like_delta, dislike_delta, comment_delta, points_delta
        )
        if updated is None:
            return None
        self._journal(
            lambda: self._shift(
                content_id, -like_delta, -dislike_delta, -comment_delta, -points_delta
            )
        )
        return updated

    async def count_by_owner_and_type(
        self, owner_id: AccountId
    ) -> dict[ContentType, int]:
        """Count an account's uploads per content type."""
        counts = Counter(
            c.content_type for c in self._contents.values() if c.owner_id == owner_id
        )
        return {content_type: counts[content_type] for content_type in ContentType}

    def _shift(
        self,
        content_id: ContentId,
        like_delta: int,
        dislike_delta: int,
        comment_delta: int,
        points_delta: Decimal,
    ) -> Optional[ContentItem]:
        content = self._contents.get(content_id)
        if not content:
            return None
        updated = content.model_copy(
            update={
                "like_count": content.like_count + like_delta,
                "dislike_count": content.dislike_count + dislike_delta,
                "comment_count": content.comment_count + comment_delta,
                "points_earned": content.points_earned + points_delta,
            }
        )
        self._contents[content_id] = updated
        return updated
