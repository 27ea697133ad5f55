"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .award import InMemoryAwardRepository
from .base import InMemoryRepository
from .comment import InMemoryCommentRepository
from .content import InMemoryContentRepository
from .reaction import InMemoryReactionRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryAwardRepository",
    "InMemoryCommentRepository",
    "InMemoryContentRepository",
    "InMemoryReactionRepository",
    "InMemoryRepository",
    "InMemoryTransactionManager",
]
