"""Strongly typed identifiers for portal domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
ClassInstanceId = NewType("ClassInstanceId", UUID)
ContentId = NewType("ContentId", UUID)
CommentId = NewType("CommentId", UUID)
AwardEventId = NewType("AwardEventId", UUID)
