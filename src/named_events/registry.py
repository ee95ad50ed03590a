"""Ordered listener storage with stable slot ids.

Each registration gets a slot id from a monotonically increasing counter. The
slots live in a dict, which keeps insertion order, so removing one never shifts
the position of another. Dispatch iterates over ``snapshot()``, a copy taken
before the first listener runs, which makes removal from inside a listener
safe.
"""

from collections.abc import Callable, Iterator
from itertools import count

from loguru import logger


class ListenerRegistry[L: Callable[..., None]]:
    """Insertion-ordered registry of listeners; duplicates are allowed."""

    def __init__(self) -> None:
        self._slots: dict[int, L] = {}
        self._next_slot = count()

    def add(self, listener: L) -> int:
        """Append a listener and return the slot id of the new registration."""
        slot_id = next(self._next_slot)
        self._slots[slot_id] = listener
        logger.trace(f"Registered listener {listener!r} in slot {slot_id}")
        return slot_id

    def remove(self, listener: L) -> bool:
        """Remove the oldest registration of ``listener`` (matched by identity).

        Returns:
            True if a registration was removed, False if none matched
        """
        for slot_id, registered in self._slots.items():
            if registered is listener:
                del self._slots[slot_id]
                logger.trace(f"Removed listener {listener!r} from slot {slot_id}")
                return True
        return False

    def remove_slot(self, slot_id: int) -> bool:
        """Remove the registration held in ``slot_id``; False if already gone."""
        listener = self._slots.pop(slot_id, None)
        if listener is None:
            return False
        logger.trace(f"Removed listener {listener!r} from slot {slot_id}")
        return True

    def snapshot(self) -> list[L]:
        """Listeners in insertion order, as of now."""
        return list(self._slots.values())

    def clear(self) -> None:
        if self._slots:
            logger.trace(f"Cleared {len(self._slots)} listener(s)")
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, listener: object) -> bool:
        return any(registered is listener for registered in self._slots.values())

    def __iter__(self) -> Iterator[L]:
        return iter(self.snapshot())
