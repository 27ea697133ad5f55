"""In-memory award event repository for testing."""

from typing import Optional

from portal.domain.model.award import AwardEvent
from portal.domain.repository.award import AwardRepository

from .base import InMemoryRepository


class InMemoryAwardRepository(InMemoryRepository, AwardRepository):
    """In-memory implementation of AwardRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[str, AwardEvent] = {}

    async def find_by_event_key(self, event_key: str) -> Optional[AwardEvent]:
        """Find the award applied for an event key."""
        return self._events.get(event_key)

    async def record(self, event: AwardEvent) -> bool:
        """Record unless the key was already recorded."""
        if event.event_key in self._events:
            return False
        self._put(self._events, event.event_key, event)
        return True

    def all(self) -> list[AwardEvent]:
        """Every recorded event, in recording order."""
        return list(self._events.values())
