"""Account use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardItem,
)
from .get_standing import GetStandingRequest, GetStandingResponse, GetStandingUseCase

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetStandingRequest",
    "GetStandingResponse",
    "GetStandingUseCase",
    "LeaderboardItem",
]
