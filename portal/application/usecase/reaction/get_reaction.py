"""Get reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import ReactionLedger
from portal.domain.value import AccountId, ContentId, ReactionState


class GetReactionsRequest(BaseModel):
    """Get reactions request."""

    account_id: str
    content_ids: list[str]


class GetReactionsResponse(BaseModel):
    """Get reactions response, keyed by content ID."""

    reactions: dict[str, ReactionState]


class GetReactionsUseCase:
    """Use case for reading the caller's reactions on one or more items."""

    def __init__(self, reaction_ledger: ReactionLedger) -> None:
        """Initialize get reactions use case.

        Args:
            reaction_ledger: Reaction ledger
        """
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: GetReactionsRequest) -> GetReactionsResponse:
        """Execute get reactions flow.

        Items the account never reacted to map to NONE.
        """
        account_id = AccountId(UUID(request.account_id))
        content_ids = [ContentId(UUID(cid)) for cid in request.content_ids]

        states = await self.reaction_ledger.reactions_for_items(account_id, content_ids)
        return GetReactionsResponse(
            reactions={str(cid): state for cid, state in states.items()}
        )
