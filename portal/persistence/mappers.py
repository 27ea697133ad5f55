"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from decimal import Decimal
from typing import Any, Dict
from uuid import UUID

from portal.domain.model import Account, AwardEvent, Comment, ContentItem, Reaction
from portal.domain.value import (
    AccountId,
    AccountRole,
    AdmissionNumber,
    AwardEventId,
    AwardReason,
    ClassInstanceId,
    CommentId,
    ContentId,
    ContentType,
    ReactionKind,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        admission_number=AdmissionNumber(row["admission_number"]),
        full_name=row["full_name"],
        class_instance_id=ClassInstanceId(_uuid(row["class_instance_id"])),
        role=AccountRole(row["role"]),
        points=Decimal(row["points"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    data = account.model_dump()
    data["role"] = account.role.value
    return data


def row_to_content(row: Dict[str, Any]) -> ContentItem:
    """Convert database row to ContentItem domain model."""
    return ContentItem(
        id=ContentId(_uuid(row["id"])),
        owner_id=AccountId(_uuid(row["owner_id"])),
        class_instance_id=ClassInstanceId(_uuid(row["class_instance_id"])),
        unit_name=row["unit_name"],
        title=row["title"],
        content_type=ContentType(row["content_type"]),
        points_earned=Decimal(row["points_earned"]),
        like_count=row["like_count"],
        dislike_count=row["dislike_count"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def content_to_dict(content: ContentItem) -> Dict[str, Any]:
    """Convert ContentItem domain model to database dict."""
    data = content.model_dump()
    data["content_type"] = content.content_type.value
    return data


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        content_id=ContentId(_uuid(row["content_id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        kind=ReactionKind(row["kind"]),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    data = reaction.model_dump()
    data["kind"] = reaction.kind.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        author_id=AccountId(_uuid(row["author_id"])),
        text=row["text"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_award_event(row: Dict[str, Any]) -> AwardEvent:
    """Convert database row to AwardEvent domain model."""
    content_id = row.get("content_id")
    return AwardEvent(
        id=AwardEventId(_uuid(row["id"])),
        event_key=row["event_key"],
        account_id=AccountId(_uuid(row["account_id"])),
        content_id=ContentId(_uuid(content_id)) if content_id else None,
        reason=AwardReason(row["reason"]),
        delta=Decimal(row["delta"]),
        created_at=row["created_at"],
    )


def award_event_to_dict(event: AwardEvent) -> Dict[str, Any]:
    """Convert AwardEvent domain model to database dict."""
    data = event.model_dump()
    data["reason"] = event.reason.value
    return data
