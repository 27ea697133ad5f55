"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from portal.config import AuthSettings, InteractionSettings, LeaderboardSettings, Settings
from portal.domain.model.award import AwardPolicy, get_award_policy
from portal.domain.model.rank import DEFAULT_RANK_TABLE, RankTable
from portal.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_interaction_settings(self, settings: Settings) -> InteractionSettings:
        """Provide interaction settings."""
        return settings.interaction

    @provide(scope=Scope.APP)
    def provide_leaderboard_settings(self, settings: Settings) -> LeaderboardSettings:
        """Provide leaderboard settings."""
        return settings.leaderboard

    @provide(scope=Scope.APP)
    def provide_award_policy(self, settings: Settings) -> AwardPolicy:
        """Provide the award schedule named by AWARDS__POLICY."""
        return get_award_policy(settings.awards.policy)

    @provide(scope=Scope.APP)
    def provide_rank_table(self) -> RankTable:
        """Provide the process-wide rank table."""
        return DEFAULT_RANK_TABLE
