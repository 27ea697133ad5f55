"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

from portal.domain.model import Account, ContentItem
from portal.domain.value import (
    AccountId,
    AccountRole,
    AdmissionNumber,
    ClassInstanceId,
    ContentId,
    ContentType,
)

CLASS_INSTANCE_ID = ClassInstanceId(uuid4())


def make_account(
    points: Decimal | int = 0,
    role: AccountRole = AccountRole.STUDENT,
    class_instance_id: ClassInstanceId = CLASS_INSTANCE_ID,
    full_name: str = "Test Student",
    joined_days_ago: int = 0,
) -> Account:
    """Build an account with a unique admission number."""
    account_id = AccountId(uuid4())
    created_at = datetime.now() - timedelta(days=joined_days_ago)
    return Account(
        id=account_id,
        admission_number=AdmissionNumber(f"ADM-{str(account_id)[:8]}"),
        full_name=full_name,
        class_instance_id=class_instance_id,
        role=role,
        points=Decimal(points),
        created_at=created_at,
        updated_at=created_at,
    )


def make_content(
    owner: Account,
    content_type: ContentType = ContentType.NOTE,
    title: str = "Week 3 lecture notes",
) -> ContentItem:
    """Build a content item owned by ``owner`` with zeroed counters."""
    return ContentItem(
        id=ContentId(uuid4()),
        owner_id=owner.id,
        class_instance_id=owner.class_instance_id,
        unit_name="Data Structures",
        title=title,
        content_type=content_type,
    )
