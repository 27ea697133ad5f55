"""List ranks use case."""

from decimal import Decimal

from pydantic import BaseModel

from portal.domain.service import RankResolver


class RankItem(BaseModel):
    """Rank in response."""

    title: str
    min_points: Decimal


class ListRanksResponse(BaseModel):
    """List ranks response, highest rank first."""

    ranks: list[RankItem]


class ListRanksUseCase:
    """Use case for listing the rank table."""

    def __init__(self, rank_resolver: RankResolver) -> None:
        self.rank_resolver = rank_resolver

    async def execute(self) -> ListRanksResponse:
        """Execute list ranks flow."""
        return ListRanksResponse(
            ranks=[
                RankItem(title=threshold.title, min_points=threshold.min_points)
                for threshold in self.rank_resolver.ranks()
            ]
        )
