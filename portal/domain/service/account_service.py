"""Account domain service."""

from dataclasses import dataclass

import logfire

from portal.domain.error import NotFoundError
from portal.domain.model import Account, RankProgress
from portal.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
)
from portal.domain.value import AccountId, ClassInstanceId, ContentType

from .base import Service
from .rank_resolver import RankResolver


@dataclass
class ContributionStats:
    """What an account has contributed to its class."""

    uploads_by_type: dict[ContentType, int]
    comments_posted: int

    @property
    def total_uploads(self) -> int:
        return sum(self.uploads_by_type.values())


@dataclass
class AccountStanding:
    """An account's balance, rank, contributions and position within its class instance."""

    account: Account
    progress: RankProgress
    class_position: int
    contributions: ContributionStats


@dataclass
class LeaderboardEntry:
    """One row of a class instance leaderboard.

    Tied balances share a position (1, 2, 2, 4).
    """

    position: int
    account: Account
    rank: str


class AccountService(Service):
    """Domain service for account reads.

    Balances are always re-read from the account store; nothing here caches
    a balance between calls.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        rank_resolver: RankResolver,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            content_repository: Content repository (upload counts)
            comment_repository: Comment repository (comment counts)
            rank_resolver: Rank resolver
        """
        self.account_repository = account_repository
        self.content_repository = content_repository
        self.comment_repository = comment_repository
        self.rank_resolver = rank_resolver

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_standing(self, account_id: AccountId) -> AccountStanding:
        """Get an account's balance, rank progress, class position and contributions.

        Args:
            account_id: Account ID

        Returns:
            Account standing

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_standing", account_id=str(account_id)):
            account = await self.get_by_id(account_id)
            ahead = await self.account_repository.count_ahead_in_class_instance(
                account.class_instance_id, account.points
            )
            uploads = await self.content_repository.count_by_owner_and_type(account_id)
            comments = await self.comment_repository.count_by_author(account_id)
            standing = AccountStanding(
                account=account,
                progress=self.rank_resolver.progress_to_next(account.points),
                class_position=ahead + 1,
                contributions=ContributionStats(
                    uploads_by_type=uploads, comments_posted=comments
                ),
            )
            logfire.info(
                "Standing computed",
                account_id=str(account_id),
                points=str(account.points),
                rank=standing.progress.current_rank,
                class_position=standing.class_position,
                total_uploads=standing.contributions.total_uploads,
            )
            return standing

    async def get_leaderboard(
        self, class_instance_id: ClassInstanceId, limit: int
    ) -> list[LeaderboardEntry]:
        """Get the top accounts of a class instance by points.

        Args:
            class_instance_id: Class instance ID
            limit: Number of entries

        Returns:
            Leaderboard entries, best first
        """
        with logfire.span(
            "account_service.get_leaderboard",
            class_instance_id=str(class_instance_id),
            limit=limit,
        ):
            accounts = await self.account_repository.find_top_by_class_instance(
                class_instance_id, limit
            )

            entries: list[LeaderboardEntry] = []
            for index, account in enumerate(accounts):
                if entries and entries[-1].account.points == account.points:
                    position = entries[-1].position
                else:
                    position = index + 1
                entries.append(
                    LeaderboardEntry(
                        position=position,
                        account=account,
                        rank=self.rank_resolver.resolve_rank(account.points),
                    )
                )

            logfire.info(
                "Leaderboard built",
                class_instance_id=str(class_instance_id),
                count=len(entries),
            )
            return entries
