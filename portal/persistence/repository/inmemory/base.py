"""Write journaling shared by the in-memory repositories."""

from contextvars import ContextVar
from typing import Any, Callable, Hashable, Optional

Undo = Callable[[], None]

# Undo log of the innermost atomic unit running in the current task
current_unit: ContextVar[Optional[list[Undo]]] = ContextVar(
    "inmemory_atomic_unit", default=None
)


class InMemoryRepository:
    """Base for in-memory repositories whose writes can be rolled back.

    Every write registers an undo with the atomic unit of the task that made
    it. An undo touches only the row its write touched, and counters are
    undone by subtracting the delta, so rolling back one unit leaves writes
    committed by other tasks in place.
    """

    def _journal(self, undo: Undo) -> None:
        unit = current_unit.get()
        if unit is not None:
            unit.append(undo)

    def _put(self, rows: dict[Any, Any], key: Hashable, row: Any) -> None:
        """Store ``row``; its undo restores the before-image while the row is still ours."""
        previous = rows.get(key)
        rows[key] = row

        def undo() -> None:
            if rows.get(key) is not row:
                return
            if previous is None:
                del rows[key]
            else:
                rows[key] = previous

        self._journal(undo)

    def _remove(self, rows: dict[Any, Any], key: Hashable) -> None:
        """Delete a row; its undo puts it back unless the key was reused."""
        previous = rows.pop(key)
        self._journal(lambda: rows.setdefault(key, previous))
