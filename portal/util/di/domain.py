"""Domain layer DI providers."""

from dishka import Scope, provide

from portal.config import AuthSettings, InteractionSettings
from portal.domain.model.award import AwardPolicy
from portal.domain.model.rank import RankTable
from portal.domain.repository import (
    AccountRepository,
    AwardRepository,
    CommentRepository,
    ContentRepository,
    ReactionRepository,
    TransactionManager,
)
from portal.domain.service import (
    AccountService,
    CommentService,
    ContentInteractionService,
    ContributionAwarder,
    JWTService,
    RankResolver,
    ReactionLedger,
)
from portal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services that touch repositories are REQUEST-scoped to share the
    request's session; pure services live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_rank_resolver(self, rank_table: RankTable) -> RankResolver:
        """Provide rank resolver."""
        return RankResolver(rank_table=rank_table)

    @provide
    def get_reaction_ledger(
        self,
        reaction_repository: ReactionRepository,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
    ) -> ReactionLedger:
        """Provide reaction ledger."""
        return ReactionLedger(
            reaction_repository=reaction_repository,
            content_repository=content_repository,
            account_repository=account_repository,
        )

    @provide
    def get_contribution_awarder(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        award_repository: AwardRepository,
        transaction_manager: TransactionManager,
        policy: AwardPolicy,
    ) -> ContributionAwarder:
        """Provide contribution awarder with the configured award policy."""
        return ContributionAwarder(
            account_repository=account_repository,
            content_repository=content_repository,
            award_repository=award_repository,
            transaction_manager=transaction_manager,
            policy=policy,
        )

    @provide
    def get_interaction_service(
        self,
        reaction_ledger: ReactionLedger,
        contribution_awarder: ContributionAwarder,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        award_repository: AwardRepository,
        transaction_manager: TransactionManager,
        interaction_settings: InteractionSettings,
    ) -> ContentInteractionService:
        """Provide content interaction domain service."""
        return ContentInteractionService(
            reaction_ledger=reaction_ledger,
            contribution_awarder=contribution_awarder,
            content_repository=content_repository,
            comment_repository=comment_repository,
            award_repository=award_repository,
            transaction_manager=transaction_manager,
            max_conflict_retries=interaction_settings.max_conflict_retries,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
        transaction_manager: TransactionManager,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            content_repository=content_repository,
            account_repository=account_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        rank_resolver: RankResolver,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            content_repository=content_repository,
            comment_repository=comment_repository,
            rank_resolver=rank_resolver,
        )
