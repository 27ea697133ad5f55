"""Rank use cases."""

from .list_ranks import ListRanksResponse, ListRanksUseCase, RankItem
from .resolve_rank import ResolveRankRequest, ResolveRankResponse, ResolveRankUseCase

__all__ = [
    "ListRanksResponse",
    "ListRanksUseCase",
    "RankItem",
    "ResolveRankRequest",
    "ResolveRankResponse",
    "ResolveRankUseCase",
]
