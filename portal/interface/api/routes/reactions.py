"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from portal.application.usecase.reaction import (
    GetReactionsRequest,
    GetReactionsUseCase,
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from portal.domain.error import DomainError
from portal.domain.service import JWTService
from portal.domain.value import ReactionState
from portal.interface.error import require_account, to_http_exception

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ReactionBody(BaseModel):
    """Body of a reaction request."""

    kind: str
    request_key: str | None = Field(default=None, max_length=100)


class MyReactionResponse(BaseModel):
    """Caller's current reaction on an item."""

    content_id: str
    state: ReactionState


@router.post("/content/{content_id}/reactions", response_model=ToggleReactionResponse)
async def toggle_reaction(
    content_id: str,
    body: ReactionBody,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleReactionResponse:
    """Like or dislike a content item.

    Sending the reaction the caller already holds removes it; sending the
    other one switches. Clients may send a ``request_key`` so that a retried
    request is answered without being applied twice.

    Requires authentication.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "react"
    )

    try:
        request = ToggleReactionRequest(
            content_id=content_id,
            account_id=account_id,
            kind=body.kind,
            request_key=body.request_key,
        )
        return await toggle_reaction_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/content/{content_id}/reactions/me", response_model=MyReactionResponse)
async def get_my_reaction(
    content_id: str,
    get_reactions_use_case: FromDishka[GetReactionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MyReactionResponse:
    """Get the caller's current reaction on a content item.

    Requires authentication.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "read reactions"
    )

    try:
        response = await get_reactions_use_case.execute(
            GetReactionsRequest(account_id=account_id, content_ids=[content_id])
        )
    except ValueError as e:
        raise to_http_exception(e)
    return MyReactionResponse(
        content_id=content_id,
        state=response.reactions.get(content_id, ReactionState.NONE),
    )
