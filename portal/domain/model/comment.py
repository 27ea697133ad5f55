"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import AccountId, CommentId, ContentId

MAX_COMMENT_LENGTH = 5000


class Comment(DomainModel):
    """Comment on a content item.

    Comments are flat (no threading). Deletion is soft and does not reverse
    the points awarded when the comment was posted.
    """

    id: CommentId
    content_id: ContentId
    author_id: AccountId
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
