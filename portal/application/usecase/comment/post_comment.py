"""Post comment use case."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import ContentInteractionService
from portal.domain.value import AccountId, ContentId


class PostCommentRequest(BaseModel):
    """Post comment request."""

    content_id: str  # UUID string
    author_id: str  # Account ID from authenticated caller
    text: str  # Validated (non-blank, length) by the interaction service


class PostCommentResponse(BaseModel):
    """Post comment response."""

    comment_id: str
    content_id: str
    text: str
    created_at: datetime
    author_delta: Decimal
    author_balance: Decimal
    owner_delta: Decimal


class PostCommentUseCase:
    """Use case for commenting on a content item."""

    def __init__(self, interaction_service: ContentInteractionService) -> None:
        """Initialize post comment use case.

        Args:
            interaction_service: Content interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: PostCommentRequest) -> PostCommentResponse:
        """Execute post comment flow.

        Raises:
            InvalidInputError: If the text is blank or too long
            NotFoundError: If the content item does not exist
        """
        outcome = await self.interaction_service.post_comment(
            ContentId(UUID(request.content_id)),
            AccountId(UUID(request.author_id)),
            request.text,
        )

        return PostCommentResponse(
            comment_id=str(outcome.comment.id),
            content_id=str(outcome.comment.content_id),
            text=outcome.comment.text,
            created_at=outcome.comment.created_at,
            author_delta=outcome.author_delta,
            author_balance=outcome.author_balance,
            owner_delta=outcome.owner_delta,
        )
