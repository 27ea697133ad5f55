"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from portal.domain.model.comment import Comment
from portal.domain.value import AccountId, CommentId, ContentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> list[Comment]:
        """Find comments on a content item, newest first.

        Args:
            content_id: The content item's ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            Comments on the item
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a live comment deleted.

        Args:
            comment_id: The comment's unique identifier
            deleted_at: Deletion timestamp

        Returns:
            The deleted comment, or None if it was missing or already deleted
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: AccountId) -> int:
        """Count an account's comments, excluding deleted ones.

        Args:
            author_id: The commenting account's ID

        Returns:
            Number of live comments
        """
        pass
