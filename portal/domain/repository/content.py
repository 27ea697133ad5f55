"""Content item repository interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from portal.domain.model.content import ContentItem
from portal.domain.value import AccountId, ContentId, ContentType


class ContentRepository(ABC):
    """Repository for ContentItem aggregate.

    Content rows are created by the upload flow; the reputation system reads
    ownership from them and maintains their aggregate counters.
    """

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[ContentItem]:
        """Find a content item by ID.

        Args:
            content_id: The content item's unique identifier

        Returns:
            The content item if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, content: ContentItem) -> ContentItem:
        """Save a content item (create or update).

        Args:
            content: The content item to save

        Returns:
            The saved content item
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        content_id: ContentId,
        *,
        like_delta: int = 0,
        dislike_delta: int = 0,
        comment_delta: int = 0,
        points_delta: Decimal = Decimal("0"),
    ) -> Optional[ContentItem]:
        """Atomically adjust the item's aggregate counters in one statement.

        Args:
            content_id: The content item's unique identifier
            like_delta: Change to the like count
            dislike_delta: Change to the dislike count
            comment_delta: Change to the comment count
            points_delta: Change to the points earned by the owner from this item

        Returns:
            The updated content item, or None if it does not exist
        """
        pass

    @abstractmethod
    async def count_by_owner_and_type(
        self, owner_id: AccountId
    ) -> dict[ContentType, int]:
        """Count an account's uploads per content type.

        Args:
            owner_id: The uploading account's ID

        Returns:
            Upload count for every content type (0 where there are none)
        """
        pass
