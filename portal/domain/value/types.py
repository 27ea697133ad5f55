"""Domain value objects for the class-resource portal.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from portal.domain.value.common import RootValueObject, ValueObject
from portal.domain.value.identifiers import AccountId, ContentId


class ReactionKind(str, Enum):
    """A reaction an account can express on a content item."""

    LIKE = "like"
    DISLIKE = "dislike"


class ReactionState(str, Enum):
    """An account's current reaction on a content item."""

    NONE = "none"
    LIKE = "like"
    DISLIKE = "dislike"

    @classmethod
    def of(cls, kind: ReactionKind) -> "ReactionState":
        """State that holds a given reaction kind."""
        return cls(kind.value)

    def after(self, desired: ReactionKind) -> "ReactionState":
        """State that results from expressing ``desired`` again.

        Expressing the reaction already held toggles it off; expressing the
        other one switches to it.
        """
        if self.value == desired.value:
            return ReactionState.NONE
        return ReactionState.of(desired)


class ContentType(str, Enum):
    """Kind of study material uploaded to a unit."""

    ASSIGNMENT = "assignment"
    NOTE = "note"
    PAST_PAPER = "past_paper"


class AccountRole(str, Enum):
    """Role of an account within its class instance."""

    STUDENT = "student"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def is_admin(self) -> bool:
        return self in (AccountRole.ADMIN, AccountRole.SUPER_ADMIN)


class AwardReason(str, Enum):
    """Domain event a points award was made for."""

    UPLOAD = "upload"
    COMMENT_AUTHORED = "comment_authored"
    COMMENT_RECEIVED = "comment_received"
    REACTION = "reaction"


class AdmissionNumber(RootValueObject[str]):
    """Student admission number, the login identifier within a class instance."""

    @field_validator("root")
    @classmethod
    def validate_admission_number(cls, v: str) -> str:
        """Validate admission number is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Admission number must be 1-50 characters")
        return v


class Transition(ValueObject):
    """Reaction state change produced by re-applying a reaction.

    ``content_id``/``account_id`` identify the reacting pair; the account is
    the actor, not necessarily the owner of the content.
    """

    content_id: ContentId
    account_id: AccountId
    from_state: ReactionState
    to_state: ReactionState

    @property
    def like_delta(self) -> int:
        """Change to the item's like count."""
        return int(self.to_state is ReactionState.LIKE) - int(
            self.from_state is ReactionState.LIKE
        )

    @property
    def dislike_delta(self) -> int:
        """Change to the item's dislike count."""
        return int(self.to_state is ReactionState.DISLIKE) - int(
            self.from_state is ReactionState.DISLIKE
        )

    def __str__(self) -> str:
        return f"{self.from_state.value}->{self.to_state.value}"
