"""Rank routes."""

from decimal import Decimal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from portal.application.usecase.rank import (
    ListRanksResponse,
    ListRanksUseCase,
    ResolveRankRequest,
    ResolveRankResponse,
    ResolveRankUseCase,
)

router = APIRouter(prefix="/ranks", tags=["ranks"], route_class=DishkaRoute)


@router.get("", response_model=ListRanksResponse)
async def list_ranks(list_ranks_use_case: FromDishka[ListRanksUseCase]) -> ListRanksResponse:
    """List every rank, highest first."""
    return await list_ranks_use_case.execute()


@router.get("/resolve", response_model=ResolveRankResponse)
async def resolve_rank(
    resolve_rank_use_case: FromDishka[ResolveRankUseCase],
    points: Decimal = Query(...),
) -> ResolveRankResponse:
    """Resolve the rank and progress for a point balance."""
    return await resolve_rank_use_case.execute(ResolveRankRequest(points=points))
