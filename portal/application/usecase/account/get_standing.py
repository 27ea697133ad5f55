"""Get standing use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import AccountService
from portal.domain.value import AccountId, ContentType


class GetStandingRequest(BaseModel):
    """Get standing request."""

    account_id: str  # Account ID from authenticated caller


class GetStandingResponse(BaseModel):
    """Get standing response."""

    account_id: str
    full_name: str
    class_instance_id: str
    points: Decimal
    rank: str
    next_rank: str | None
    points_needed: Decimal
    class_position: int
    total_uploads: int
    assignments_uploaded: int
    notes_uploaded: int
    past_papers_uploaded: int
    comments_posted: int


class GetStandingUseCase:
    """Use case for the caller's balance, rank, class position and contributions."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get standing use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetStandingRequest) -> GetStandingResponse:
        """Execute get standing flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        standing = await self.account_service.get_standing(
            AccountId(UUID(request.account_id))
        )

        uploads = standing.contributions.uploads_by_type

        return GetStandingResponse(
            account_id=str(standing.account.id),
            full_name=standing.account.full_name,
            class_instance_id=str(standing.account.class_instance_id),
            points=standing.account.points,
            rank=standing.progress.current_rank,
            next_rank=standing.progress.next_rank,
            points_needed=standing.progress.points_needed,
            class_position=standing.class_position,
            total_uploads=standing.contributions.total_uploads,
            assignments_uploaded=uploads[ContentType.ASSIGNMENT],
            notes_uploaded=uploads[ContentType.NOTE],
            past_papers_uploaded=uploads[ContentType.PAST_PAPER],
            comments_posted=standing.contributions.comments_posted,
        )
