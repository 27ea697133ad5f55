"""Repository interfaces for the portal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from portal.domain.repository.account import AccountRepository
from portal.domain.repository.award import AwardRepository
from portal.domain.repository.comment import CommentRepository
from portal.domain.repository.content import ContentRepository
from portal.domain.repository.reaction import ReactionRepository
from portal.domain.repository.transaction import TransactionManager

__all__ = [
    "AccountRepository",
    "AwardRepository",
    "CommentRepository",
    "ContentRepository",
    "ReactionRepository",
    "TransactionManager",
]
