"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Runs a block of repository calls as one all-or-nothing unit.

    If the block raises (including on cancellation) every write made inside
    it is undone. Units may be nested; an inner failure only undoes the
    inner block.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit.

        Usage:
            async with transaction_manager.atomic():
                ...
        """
        pass
