"""Value-backed event sources.

A ``ValueBackedEventSource`` stores a current value and only notifies its
listeners when a new value differs from the stored one. Consumers get a
``ValueEvent`` handle, which can subscribe and read the value but cannot
change it.

```python
speed = create_value_backed_event("slow")
speed.evt.subscribe(lambda value: print(f"now {value}"))
speed.set_value("slow")  # equal, nothing happens
speed.set_value("fast")  # prints "now fast"
speed.set_value(lambda current: current.upper())  # prints "now FAST"
```
"""

from collections.abc import Callable
from types import NoneType

from loguru import logger

from .core import Event, EventSource
from .registry import ListenerRegistry
from .types import ListenerErrorHandler, ValueUpdater

# Compared with == when both sides have the same type; everything else by identity.
SCALAR_TYPES = (str, bytes, int, float, complex, bool, NoneType)


def same_value(current: object, candidate: object) -> bool:
    """Default equality for value-backed sources.

    Identity, or ``==`` between immutable scalars of the same type. Containers
    and other objects are never compared structurally.
    """
    if current is candidate:
        return True
    if type(current) is not type(candidate):
        return False
    return isinstance(current, SCALAR_TYPES) and current == candidate


class ValueEvent[T](Event[[T]]):
    """Subscription handle that can also read the current value."""

    def __init__(self, registry: ListenerRegistry[Callable[[T], None]], getter: Callable[[], T]) -> None:
        super().__init__(registry)
        self._getter = getter

    def get_value(self) -> T:
        return self._getter()


class ValueBackedEventSource[T](EventSource[[T]]):
    """Event source that retains the last dispatched value and skips equal updates.

    Args:
        initial: Starting value; no listener is notified for it
        equals: ``(current, candidate) -> bool``; defaults to ``same_value``
        name: Label used in log messages
        isolate_listeners: Dispatch policy; None uses the settings default
        on_listener_error: Side channel for failures during isolated dispatch
    """

    def __init__(
        self,
        initial: T,
        *,
        equals: Callable[[T, T], bool] | None = None,
        name: str | None = None,
        isolate_listeners: bool | None = None,
        on_listener_error: ListenerErrorHandler | None = None,
    ) -> None:
        self._value = initial
        self._equals = equals or same_value
        super().__init__(name=name, isolate_listeners=isolate_listeners, on_listener_error=on_listener_error)

    def _create_handle(self) -> ValueEvent[T]:
        return ValueEvent(self._registry, self.get_value)

    @property
    def evt(self) -> ValueEvent[T]:
        return self._evt

    def get_value(self) -> T:
        return self._value

    def set_value(self, next_value: T | ValueUpdater[T]) -> T:
        """Replace the current value and notify listeners if it changed.

        Args:
            next_value: The new value, or a function computing it from the
                current one. A callable is always treated as an updater, so a
                source holding callables must be updated through ``trigger``.

        Returns:
            The value this call stored, or the unchanged previous one when
            they compared equal. Listeners setting the value again during
            dispatch do not change what this call returns.
        """
        candidate = next_value(self._value) if callable(next_value) else next_value
        return candidate if self._update(candidate) else self._value

    def trigger(self, value: T) -> None:
        """Same as ``set_value`` for a literal value, without the updater form."""
        self._update(value)

    def _update(self, candidate: T) -> bool:
        if self._equals(self._value, candidate):
            logger.trace(f"{self._name}: value unchanged ({candidate!r}), skipping dispatch")
            return False
        self._value = candidate
        self._dispatch(candidate)
        return True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} value={self._value!r} listeners={len(self._registry)}>"
