"""Content item aggregate root.

Content items are study materials (assignments, notes, past papers)
uploaded to a unit of a class instance. Upload and file storage happen
elsewhere; this model only carries what the reputation system needs.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import AccountId, ClassInstanceId, ContentId, ContentType


class ContentItem(DomainModel):
    """Content item aggregate root.

    The counters are denormalized aggregates maintained atomically alongside
    reactions and comments:
    - ``like_count``/``dislike_count``: current reactions on the item
    - ``comment_count``: live (not deleted) comments
    - ``points_earned``: reaction and comment points awarded to the owner
      because of this item
    """

    id: ContentId
    owner_id: AccountId
    class_instance_id: ClassInstanceId
    unit_name: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=300)
    content_type: ContentType
    points_earned: Decimal = Decimal("0")
    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
