"""Get leaderboard use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from portal.domain.service import AccountService
from portal.domain.value import ClassInstanceId


class LeaderboardItem(BaseModel):
    """Leaderboard row in response."""

    position: int
    account_id: str
    full_name: str
    points: Decimal
    rank: str


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    class_instance_id: str  # UUID string
    limit: int = Field(default=5, ge=1)


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    class_instance_id: str
    entries: list[LeaderboardItem]


class GetLeaderboardUseCase:
    """Use case for the top accounts of a class instance."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get leaderboard use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow."""
        entries = await self.account_service.get_leaderboard(
            ClassInstanceId(UUID(request.class_instance_id)), request.limit
        )

        return GetLeaderboardResponse(
            class_instance_id=request.class_instance_id,
            entries=[
                LeaderboardItem(
                    position=entry.position,
                    account_id=str(entry.account.id),
                    full_name=entry.account.full_name,
                    points=entry.account.points,
                    rank=entry.rank,
                )
                for entry in entries
            ],
        )
