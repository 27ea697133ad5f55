"""Domain services."""

from .account_service import (
    AccountService,
    AccountStanding,
    ContributionStats,
    LeaderboardEntry,
)
from .base import Service
from .comment_service import CommentService
from .contribution_awarder import AwardResult, CommentAward, ContributionAwarder
from .interaction_service import (
    CommentOutcome,
    ContentInteractionService,
    ReactionOutcome,
    UploadOutcome,
)
from .jwt_service import JWTService
from .rank_resolver import RankResolver
from .reaction_ledger import ReactionLedger

__all__ = [
    "AccountService",
    "AccountStanding",
    "AwardResult",
    "CommentAward",
    "CommentOutcome",
    "CommentService",
    "ContributionStats",
    "ContentInteractionService",
    "ContributionAwarder",
    "JWTService",
    "LeaderboardEntry",
    "RankResolver",
    "ReactionLedger",
    "ReactionOutcome",
    "Service",
    "UploadOutcome",
]
