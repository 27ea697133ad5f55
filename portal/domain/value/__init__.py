"""Domain value objects for the class-resource portal."""

from portal.domain.value.identifiers import (
    AccountId,
    AwardEventId,
    ClassInstanceId,
    CommentId,
    ContentId,
)
from portal.domain.value.types import (
    AccountRole,
    AdmissionNumber,
    AwardReason,
    ContentType,
    ReactionKind,
    ReactionState,
    Transition,
)

__all__ = [
    # Identifiers
    "AccountId",
    "AwardEventId",
    "ClassInstanceId",
    "CommentId",
    "ContentId",
    # Types
    "AccountRole",
    "AdmissionNumber",
    "AwardReason",
    "ContentType",
    "ReactionKind",
    "ReactionState",
    "Transition",
]
