"""PostgreSQL repository implementations."""

from portal.persistence.repository.account import PostgresAccountRepository
from portal.persistence.repository.award import PostgresAwardRepository
from portal.persistence.repository.comment import PostgresCommentRepository
from portal.persistence.repository.content import PostgresContentRepository
from portal.persistence.repository.reaction import PostgresReactionRepository
from portal.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresAccountRepository",
    "PostgresAwardRepository",
    "PostgresCommentRepository",
    "PostgresContentRepository",
    "PostgresReactionRepository",
    "PostgresTransactionManager",
]
