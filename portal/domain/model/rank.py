"""Rank table.

Ranks are human-readable titles derived purely from a point balance via an
ordered threshold table. The table is static and process-wide.
"""

from decimal import Decimal
from typing import Iterable, Optional

from pydantic import Field, model_validator

from portal.domain.model.common import DomainModel


class RankThreshold(DomainModel):
    """Minimum points needed to hold a rank title."""

    min_points: Decimal = Field(ge=0)
    title: str = Field(min_length=1, max_length=100)


class RankTable(DomainModel):
    """Thresholds ordered from highest to lowest.

    Invariants:
    - at least one threshold
    - strictly descending ``min_points``
    - the last threshold is the zero-point default rank
    """

    thresholds: tuple[RankThreshold, ...]

    @model_validator(mode="after")
    def validate_ordering(self) -> "RankTable":
        """Validate thresholds descend strictly and end at zero."""
        if not self.thresholds:
            raise ValueError("Rank table needs at least one threshold")
        for higher, lower in zip(self.thresholds, self.thresholds[1:]):
            if higher.min_points <= lower.min_points:
                raise ValueError(
                    f"Rank thresholds must be strictly descending: "
                    f"'{higher.title}' ({higher.min_points}) is not above "
                    f"'{lower.title}' ({lower.min_points})"
                )
        if self.thresholds[-1].min_points != 0:
            raise ValueError("The lowest rank threshold must be 0 points")
        return self

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int | str | Decimal, str]]) -> "RankTable":
        """Build a table from ``(min_points, title)`` pairs, highest first."""
        return cls(
            thresholds=tuple(
                RankThreshold(min_points=Decimal(str(points)), title=title)
                for points, title in pairs
            )
        )

    @property
    def default(self) -> RankThreshold:
        """Zero-point rank held by anyone below every other threshold."""
        return self.thresholds[-1]

    @property
    def top(self) -> RankThreshold:
        return self.thresholds[0]

    def above(self, threshold: RankThreshold) -> Optional[RankThreshold]:
        """Next higher rank than ``threshold``, or None at the top."""
        index = self.thresholds.index(threshold)
        return self.thresholds[index - 1] if index > 0 else None


class RankProgress(DomainModel):
    """Where a balance sits in the rank table."""

    points: Decimal
    current_rank: str
    next_rank: Optional[str] = None
    points_needed: Decimal = Decimal("0")


DEFAULT_RANK_TABLE = RankTable.from_pairs(
    [
        (400, "Celestial Champion"),
        (250, "Phoenix Prodigy"),
        (150, "Eternal Guardian"),
        (100, "Cosmic Intellect"),
        (75, "Galactic Sage"),
        (50, "Truth Hunter"),
        (30, "Wisdom Weaver"),
        (15, "Insight Voyager"),
        (5, "Knowledge Keeper"),
        (0, "Novice"),
    ]
)
