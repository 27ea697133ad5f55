"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from portal.domain.model.comment import Comment
from portal.domain.repository.comment import CommentRepository
from portal.domain.value import AccountId, CommentId, ContentId

from .base import InMemoryRepository


class InMemoryCommentRepository(InMemoryRepository, CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_content(
        self, content_id: ContentId, include_deleted: bool = False
    ) -> list[Comment]:
        """Find comments on a content item, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.content_id == content_id and (include_deleted or c.deleted_at is None)
        ]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._put(self._comments, comment.id, comment)
        return comment

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a live comment deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        deleted = comment.model_copy(update={"deleted_at": deleted_at})
        self._put(self._comments, comment_id, deleted)
        return deleted

    async def count_by_author(self, author_id: AccountId) -> int:
        """Count an account's live comments."""
        return sum(
            1
            for c in self._comments.values()
            if c.author_id == author_id and c.deleted_at is None
        )
