"""Factory functions for the event source flavors.

Each call returns an independent source with an empty registry.
"""

from collections.abc import Callable

from .core import EventSource
from .types import ListenerErrorHandler
from .value import ValueBackedEventSource


def create_custom_event[**P](
    *,
    name: str | None = None,
    isolate_listeners: bool | None = None,
    on_listener_error: ListenerErrorHandler | None = None,
) -> EventSource[P]:
    """Create an event source for an arbitrary listener signature.

    The signature is fixed by annotating the attribute that holds the source:

    ```python
    self._on_go: EventSource[[str, str]] = create_custom_event()
    self._on_go.trigger("fast", "left")
    ```
    """
    return EventSource(name=name, isolate_listeners=isolate_listeners, on_listener_error=on_listener_error)


def create_event(
    *,
    name: str | None = None,
    isolate_listeners: bool | None = None,
    on_listener_error: ListenerErrorHandler | None = None,
) -> EventSource[[]]:
    """Create an event source whose listeners take no arguments."""
    return EventSource(name=name, isolate_listeners=isolate_listeners, on_listener_error=on_listener_error)


def create_value_event[T](
    *,
    name: str | None = None,
    isolate_listeners: bool | None = None,
    on_listener_error: ListenerErrorHandler | None = None,
) -> EventSource[[T]]:
    """Create an event source whose listeners receive a single value.

    Nothing is retained between triggers; see ``create_value_backed_event``.
    """
    return EventSource(name=name, isolate_listeners=isolate_listeners, on_listener_error=on_listener_error)


def create_value_backed_event[T](
    initial: T,
    *,
    equals: Callable[[T, T], bool] | None = None,
    name: str | None = None,
    isolate_listeners: bool | None = None,
    on_listener_error: ListenerErrorHandler | None = None,
) -> ValueBackedEventSource[T]:
    """Create an event source that stores ``initial`` and dispatches only on change."""
    return ValueBackedEventSource(
        initial,
        equals=equals,
        name=name,
        isolate_listeners=isolate_listeners,
        on_listener_error=on_listener_error,
    )


__all__ = [
    "create_custom_event",
    "create_event",
    "create_value_backed_event",
    "create_value_event",
]
