"""Reaction entity.

A reaction is one account's like or dislike on one content item.
"""

from datetime import datetime

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import AccountId, ContentId, ReactionKind, ReactionState


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - At most one reaction per (content item, account), enforced by the
      composite primary key
    - ``version`` increases on every write and is used for compare-and-swap
    - Toggling a reaction off deletes the row rather than storing NONE
    """

    content_id: ContentId
    account_id: AccountId
    kind: ReactionKind
    version: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def state(self) -> ReactionState:
        return ReactionState.of(self.kind)
