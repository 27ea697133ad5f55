"""Award event repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from portal.domain.model.award import AwardEvent


class AwardRepository(ABC):
    """Repository for AwardEvent records.

    Event keys are unique; recording a key twice is a no-op.
    """

    @abstractmethod
    async def find_by_event_key(self, event_key: str) -> Optional[AwardEvent]:
        """Find the award applied for an event key.

        Args:
            event_key: Logical event identifier

        Returns:
            The award event if one was recorded, None otherwise
        """
        pass

    @abstractmethod
    async def record(self, event: AwardEvent) -> bool:
        """Record an award event unless its key was already recorded.

        Args:
            event: The award event

        Returns:
            True if recorded, False if the event key already existed
        """
        pass
