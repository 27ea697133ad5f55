"""Reaction use cases."""

from .get_reaction import GetReactionsRequest, GetReactionsResponse, GetReactionsUseCase
from .toggle_reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)

__all__ = [
    "GetReactionsRequest",
    "GetReactionsResponse",
    "GetReactionsUseCase",
    "ToggleReactionRequest",
    "ToggleReactionResponse",
    "ToggleReactionUseCase",
]
