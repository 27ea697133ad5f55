"""Award events and award policies.

An award event is the record that a points delta was applied to an account
for one logical domain event. Its ``event_key`` is unique, which is what
makes awards idempotent: replaying the same event cannot apply twice.

An award policy is the named schedule that maps domain events to deltas.
Two schedules exist and are selected by configuration.
"""

from datetime import datetime
from decimal import Decimal
from typing import Mapping, Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import (
    AccountId,
    AwardEventId,
    AwardReason,
    ContentId,
    ContentType,
    ReactionState,
    Transition,
)
from portal.util.error import ConfigurationError


class AwardEvent(DomainModel):
    """Applied points award."""

    id: AwardEventId
    event_key: str = Field(min_length=1, max_length=255)
    account_id: AccountId
    content_id: Optional[ContentId] = None
    reason: AwardReason
    delta: Decimal
    created_at: datetime = Field(default_factory=datetime.now)


class AwardPolicy(DomainModel):
    """Named award schedule.

    Reaction deltas are the difference between the value of the new state
    and the old one, so NONE->LIKE is +1, LIKE->DISLIKE is -2 and so on.
    """

    name: str
    upload_awards: Mapping[ContentType, Decimal]
    comment_author_award: Decimal
    comment_owner_award: Decimal
    reaction_values: Mapping[ReactionState, Decimal] = {
        ReactionState.NONE: Decimal("0"),
        ReactionState.LIKE: Decimal("1"),
        ReactionState.DISLIKE: Decimal("-1"),
    }

    def upload_award(self, content_type: ContentType) -> Decimal:
        """Points for uploading a content item of the given type."""
        return self.upload_awards.get(content_type, Decimal("0"))

    def transition_delta(self, transition: Transition) -> Decimal:
        """Creator delta for a reaction transition (before self-award suppression)."""
        return (
            self.reaction_values[transition.to_state]
            - self.reaction_values[transition.from_state]
        )


FLAT_AWARD_POLICY = AwardPolicy(
    name="flat",
    upload_awards={content_type: Decimal("5") for content_type in ContentType},
    comment_author_award=Decimal("1"),
    comment_owner_award=Decimal("1"),
)

BY_TYPE_AWARD_POLICY = AwardPolicy(
    name="by_type",
    upload_awards={
        ContentType.ASSIGNMENT: Decimal("10"),
        ContentType.NOTE: Decimal("30"),
        ContentType.PAST_PAPER: Decimal("25"),
    },
    comment_author_award=Decimal("0.1"),
    comment_owner_award=Decimal("0"),
)

AWARD_POLICIES: dict[str, AwardPolicy] = {
    policy.name: policy for policy in (FLAT_AWARD_POLICY, BY_TYPE_AWARD_POLICY)
}


def get_award_policy(name: str) -> AwardPolicy:
    """Look up an award policy by name.

    Raises:
        ConfigurationError: If no policy has that name
    """
    try:
        return AWARD_POLICIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown award policy '{name}', expected one of {sorted(AWARD_POLICIES)}"
        )
