"""Record upload use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import ContentInteractionService
from portal.domain.value import AccountId, ContentId


class RecordUploadRequest(BaseModel):
    """Record upload request.

    Sent once the upload flow has stored the file and created the item.
    """

    content_id: str  # UUID string
    owner_id: str  # Account ID from authenticated caller


class RecordUploadResponse(BaseModel):
    """Record upload response."""

    content_id: str
    awarded: bool  # False when the upload was already awarded
    delta: Decimal
    balance: Decimal


class RecordUploadUseCase:
    """Use case for awarding an uploader."""

    def __init__(self, interaction_service: ContentInteractionService) -> None:
        """Initialize record upload use case.

        Args:
            interaction_service: Content interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: RecordUploadRequest) -> RecordUploadResponse:
        """Execute record upload flow.

        Raises:
            NotFoundError: If the content item does not exist
            NotAuthorizedError: If the caller does not own the item
        """
        outcome = await self.interaction_service.record_upload(
            ContentId(UUID(request.content_id)),
            AccountId(UUID(request.owner_id)),
        )

        return RecordUploadResponse(
            content_id=str(outcome.content_id),
            awarded=outcome.awarded,
            delta=outcome.delta,
            balance=outcome.balance,
        )
