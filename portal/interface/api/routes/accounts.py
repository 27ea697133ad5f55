"""Account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from portal.application.usecase.account import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetStandingRequest,
    GetStandingResponse,
    GetStandingUseCase,
)
from portal.config import LeaderboardSettings
from portal.domain.error import DomainError
from portal.domain.service import JWTService
from portal.interface.error import require_account, to_http_exception

router = APIRouter(tags=["accounts"], route_class=DishkaRoute)


@router.get("/accounts/me/standing", response_model=GetStandingResponse)
async def get_my_standing(
    get_standing_use_case: FromDishka[GetStandingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetStandingResponse:
    """Get the caller's balance, rank progress, class position and contributions.

    Requires authentication.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "view standing"
    )

    try:
        return await get_standing_use_case.execute(
            GetStandingRequest(account_id=account_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get(
    "/class-instances/{class_instance_id}/leaderboard",
    response_model=GetLeaderboardResponse,
)
async def get_leaderboard(
    class_instance_id: str,
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    leaderboard_settings: FromDishka[LeaderboardSettings],
    limit: int | None = Query(default=None, ge=1),
) -> GetLeaderboardResponse:
    """Get the top accounts of a class instance by points."""
    if limit is None:
        limit = leaderboard_settings.default_limit
    limit = min(limit, leaderboard_settings.max_limit)

    try:
        return await get_leaderboard_use_case.execute(
            GetLeaderboardRequest(class_instance_id=class_instance_id, limit=limit)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
