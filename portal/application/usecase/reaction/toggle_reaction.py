"""Toggle reaction use case."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from portal.domain.service import ContentInteractionService
from portal.domain.value import AccountId, ContentId, ReactionState


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    content_id: str  # UUID string
    account_id: str  # Account ID from authenticated caller
    kind: str  # "like" or "dislike", validated by the reaction ledger
    request_key: str | None = Field(default=None, max_length=100)


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    content_id: str
    previous_state: ReactionState
    state: ReactionState
    like_count: int
    dislike_count: int
    creator_delta: Decimal
    replayed: bool


class ToggleReactionUseCase:
    """Use case for liking or disliking a content item."""

    def __init__(self, interaction_service: ContentInteractionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            interaction_service: Content interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Args:
            request: Toggle reaction request

        Returns:
            New reaction state and the item's counts

        Raises:
            InvalidInputError: If the reaction kind is unknown
            NotFoundError: If the content item does not exist
            ConflictError: If concurrency retries are exhausted
        """
        outcome = await self.interaction_service.toggle_reaction(
            ContentId(UUID(request.content_id)),
            AccountId(UUID(request.account_id)),
            request.kind,
            request_key=request.request_key,
        )

        return ToggleReactionResponse(
            content_id=str(outcome.content_id),
            previous_state=outcome.previous_state,
            state=outcome.state,
            like_count=outcome.like_count,
            dislike_count=outcome.dislike_count,
            creator_delta=outcome.creator_delta,
            replayed=outcome.replayed,
        )
