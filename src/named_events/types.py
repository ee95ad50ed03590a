"""Type aliases shared by the event source modules."""

from collections.abc import Callable

type EventListener = Callable[[], None]
"""A listener called with no arguments."""

type ValueEventListener[T] = Callable[[T], None]
"""A listener called with the new value of an event."""

type EventListenerRemover = Callable[[], None]
"""Removes one listener registration; safe to call more than once."""

type ValueUpdater[T] = Callable[[T], T]
"""Computes a new value from the current one."""

type ListenerErrorHandler = Callable[[Callable[..., None], Exception], None]
"""Receives the failing listener and its exception during isolated dispatch."""

__all__ = [
    "EventListener",
    "EventListenerRemover",
    "ListenerErrorHandler",
    "ValueEventListener",
    "ValueUpdater",
]
