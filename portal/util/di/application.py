"""Application layer DI providers."""

from dishka import Scope, provide

from portal.application.usecase.account import GetLeaderboardUseCase, GetStandingUseCase
from portal.application.usecase.comment import (
    DeleteCommentUseCase,
    GetCommentsUseCase,
    PostCommentUseCase,
)
from portal.application.usecase.content import RecordUploadUseCase
from portal.application.usecase.rank import ListRanksUseCase, ResolveRankUseCase
from portal.application.usecase.reaction import GetReactionsUseCase, ToggleReactionUseCase
from portal.domain.service import (
    AccountService,
    CommentService,
    ContentInteractionService,
    RankResolver,
    ReactionLedger,
)
from portal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Reaction use cases
    @provide
    def get_toggle_reaction_use_case(
        self, interaction_service: ContentInteractionService
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(interaction_service=interaction_service)

    @provide
    def get_reactions_use_case(self, reaction_ledger: ReactionLedger) -> GetReactionsUseCase:
        """Provide get reactions use case."""
        return GetReactionsUseCase(reaction_ledger=reaction_ledger)

    # Comment use cases
    @provide
    def get_post_comment_use_case(
        self, interaction_service: ContentInteractionService
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(interaction_service=interaction_service)

    @provide
    def get_comments_use_case(self, comment_service: CommentService) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Content use cases
    @provide
    def get_record_upload_use_case(
        self, interaction_service: ContentInteractionService
    ) -> RecordUploadUseCase:
        """Provide record upload use case."""
        return RecordUploadUseCase(interaction_service=interaction_service)

    # Rank use cases
    @provide(scope=Scope.APP)
    def get_resolve_rank_use_case(self, rank_resolver: RankResolver) -> ResolveRankUseCase:
        """Provide resolve rank use case."""
        return ResolveRankUseCase(rank_resolver=rank_resolver)

    @provide(scope=Scope.APP)
    def get_list_ranks_use_case(self, rank_resolver: RankResolver) -> ListRanksUseCase:
        """Provide list ranks use case."""
        return ListRanksUseCase(rank_resolver=rank_resolver)

    # Account use cases
    @provide
    def get_standing_use_case(self, account_service: AccountService) -> GetStandingUseCase:
        """Provide get standing use case."""
        return GetStandingUseCase(account_service=account_service)

    @provide
    def get_leaderboard_use_case(
        self, account_service: AccountService
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(account_service=account_service)
