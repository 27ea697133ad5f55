"""Mock persistence providers for testing."""

from dishka import Scope, provide

from portal.domain.repository import (
    AccountRepository,
    AwardRepository,
    CommentRepository,
    ContentRepository,
    ReactionRepository,
    TransactionManager,
)
from portal.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryAwardRepository,
    InMemoryCommentRepository,
    InMemoryContentRepository,
    InMemoryReactionRepository,
    InMemoryTransactionManager,
)
from portal.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    A failed atomic unit undoes only the writes it made itself.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self) -> ContentRepository:
        """Provide in-memory content repository."""
        return InMemoryContentRepository()

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return InMemoryReactionRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_award_repository(self) -> AwardRepository:
        """Provide in-memory award event repository."""
        return InMemoryAwardRepository()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self) -> TransactionManager:
        """Provide undo-log transaction manager for the in-memory repositories."""
        return InMemoryTransactionManager()
