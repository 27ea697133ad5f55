"""Resolve rank use case."""

from decimal import Decimal

from pydantic import BaseModel

from portal.domain.service import RankResolver


class ResolveRankRequest(BaseModel):
    """Resolve rank request."""

    points: Decimal


class ResolveRankResponse(BaseModel):
    """Resolve rank response."""

    points: Decimal
    rank: str
    next_rank: str | None
    points_needed: Decimal


class ResolveRankUseCase:
    """Use case for looking up the rank of an arbitrary balance."""

    def __init__(self, rank_resolver: RankResolver) -> None:
        self.rank_resolver = rank_resolver

    async def execute(self, request: ResolveRankRequest) -> ResolveRankResponse:
        """Execute resolve rank flow."""
        progress = self.rank_resolver.progress_to_next(request.points)
        return ResolveRankResponse(
            points=progress.points,
            rank=progress.current_rank,
            next_rank=progress.next_rank,
            points_needed=progress.points_needed,
        )
