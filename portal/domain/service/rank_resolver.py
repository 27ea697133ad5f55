"""Rank resolution domain service."""

from decimal import Decimal

from portal.domain.model.rank import RankProgress, RankTable, RankThreshold

from .base import Service


class RankResolver(Service):
    """Maps point balances to rank titles.

    Pure lookups over an immutable table: no I/O, no shared mutable state,
    safe to call concurrently.
    """

    def __init__(self, rank_table: RankTable) -> None:
        """Initialize rank resolver.

        Args:
            rank_table: Thresholds ordered from highest to lowest
        """
        self.rank_table = rank_table

    def resolve_threshold(self, points: Decimal | int) -> RankThreshold:
        """Find the highest threshold reached by a balance.

        Balances below every threshold (negative ones included) get the
        table's zero-point default rank.
        """
        points = Decimal(points)
        for threshold in self.rank_table.thresholds:
            if points >= threshold.min_points:
                return threshold
        return self.rank_table.default

    def resolve_rank(self, points: Decimal | int) -> str:
        """Rank title for a balance."""
        return self.resolve_threshold(points).title

    def progress_to_next(self, points: Decimal | int) -> RankProgress:
        """Current rank, the next one up and the points still needed to reach it.

        At the top rank ``next_rank`` is None and ``points_needed`` is 0.
        """
        points = Decimal(points)
        current = self.resolve_threshold(points)
        next_threshold = self.rank_table.above(current)
        if next_threshold is None:
            return RankProgress(points=points, current_rank=current.title)
        return RankProgress(
            points=points,
            current_rank=current.title,
            next_rank=next_threshold.title,
            points_needed=max(Decimal("0"), next_threshold.min_points - points),
        )

    def ranks(self) -> tuple[RankThreshold, ...]:
        """All ranks, highest first."""
        return self.rank_table.thresholds
