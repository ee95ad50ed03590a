"""Event source core.

An ``EventSource`` pairs a private ``ListenerRegistry`` with two capabilities:

- ``evt``: an ``Event`` handle consumers use to subscribe and unsubscribe
- ``trigger``: called by the owner to notify every registered listener

The owner usually keeps the source in a private attribute and exposes only the
handle:

```python
class Oven:
    def __init__(self) -> None:
        self._on_bake = create_event()

    @property
    def on_bake(self) -> Event[[]]:
        return self._on_bake.evt

    def shake(self) -> None:
        self._on_bake.trigger()


oven = Oven()
remove = oven.on_bake.subscribe(lambda: print("baked"))
oven.shake()  # prints "baked"
remove()
oven.shake()  # no listener left
```

## Dispatch policy

By default dispatch is fail-fast: a listener exception propagates out of
``trigger`` and later listeners are skipped for that call. With
``isolate_listeners=True`` each listener runs in its own try-scope; failures
are logged and handed to ``on_listener_error``, or collected into a
``ListenerDispatchError`` raised once every listener ran.
"""

from collections.abc import Callable

from loguru import logger
from pydantic import ValidationError

from .exceptions import ListenerDispatchError, ListenerRegistrationError
from .registry import ListenerRegistry
from .settings import get_settings
from .types import EventListenerRemover, ListenerErrorHandler


def _ensure_callable(listener: object) -> None:
    if not callable(listener):
        raise ListenerRegistrationError(listener)


def _default_isolation() -> bool:
    """Dispatch policy from settings; fail-fast when the settings do not validate."""
    try:
        return get_settings().isolate_listeners
    except ValidationError as e:
        logger.warning(f"Invalid named_events settings, falling back to fail-fast dispatch: {e}")
        return False


class Event[**P]:
    """Subscription handle of an event source.

    Holding an ``Event`` lets a consumer add and remove listeners but not
    trigger the event.
    """

    def __init__(self, registry: ListenerRegistry[Callable[P, None]]) -> None:
        self._registry = registry

    def subscribe(self, listener: Callable[P, None]) -> EventListenerRemover:
        """Register a listener and return a function that removes it.

        The remover cancels exactly this registration, even if the same
        listener was registered more than once: removing the second
        subscription of a listener leaves the first one in place, unlike
        ``remove_listener``, which always takes the oldest occurrence.
        Calling the remover again is a no-op.

        Args:
            listener: Called on every trigger with the trigger's arguments

        Returns:
            A zero-argument remover

        Raises:
            ListenerRegistrationError: If listener is not callable
        """
        _ensure_callable(listener)
        slot_id = self._registry.add(listener)
        registry = self._registry

        def remove() -> None:
            registry.remove_slot(slot_id)

        return remove

    def add_listener(self, listener: Callable[P, None]) -> None:
        """Register a listener without allocating a remover.

        Remove it later with ``remove_listener``.

        Raises:
            ListenerRegistrationError: If listener is not callable
        """
        _ensure_callable(listener)
        self._registry.add(listener)

    def remove_listener(self, listener: Callable[P, None]) -> None:
        """Remove the oldest registration of ``listener``; no-op if absent."""
        self._registry.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._registry)


class EventSource[**P]:
    """Owner side of an event: the registry, its ``evt`` handle and ``trigger``.

    Args:
        name: Label used in log messages
        isolate_listeners: Dispatch policy; None uses ``NAMED_EVENTS_ISOLATE_LISTENERS``
        on_listener_error: Side channel for failures during isolated dispatch;
            ignored (with a warning) when the source fails fast
    """

    def __init__(
        self,
        *,
        name: str | None = None,
        isolate_listeners: bool | None = None,
        on_listener_error: ListenerErrorHandler | None = None,
    ) -> None:
        self._name = name or f"{type(self).__name__}@{id(self):x}"
        self._isolate_listeners = _default_isolation() if isolate_listeners is None else isolate_listeners
        self._on_listener_error = on_listener_error
        if on_listener_error is not None and not self._isolate_listeners:
            logger.warning(f"{self._name}: on_listener_error is only used with isolated dispatch and will be ignored")
        self._registry: ListenerRegistry[Callable[P, None]] = ListenerRegistry()
        self._evt = self._create_handle()

    def _create_handle(self) -> Event[P]:
        return Event(self._registry)

    @property
    def evt(self) -> Event[P]:
        """The subscription handle to hand out to consumers."""
        return self._evt

    @property
    def name(self) -> str:
        return self._name

    @property
    def isolate_listeners(self) -> bool:
        return self._isolate_listeners

    @property
    def listener_count(self) -> int:
        return len(self._registry)

    def trigger(self, *args: P.args, **kwargs: P.kwargs) -> None:
        """Call every registered listener, in registration order, with the given arguments."""
        self._dispatch(*args, **kwargs)

    def clear(self) -> None:
        """Drop every registration. Outstanding removers become no-ops."""
        self._registry.clear()

    def _dispatch(self, *args: P.args, **kwargs: P.kwargs) -> None:
        listeners = self._registry.snapshot()
        if not listeners:
            logger.trace(f"No listeners registered for {self._name}")
            return

        logger.trace(f"Dispatching {self._name} to {len(listeners)} listener(s)")

        if not self._isolate_listeners:
            for listener in listeners:
                listener(*args, **kwargs)
            return

        failures: list[tuple[Callable[..., None], Exception]] = []
        for listener in listeners:
            try:
                listener(*args, **kwargs)
            except Exception as e:
                logger.opt(exception=e).error(f"Listener {listener!r} of {self._name} failed: {e}")
                if self._on_listener_error is not None:
                    self._on_listener_error(listener, e)
                else:
                    failures.append((listener, e))

        if failures:
            logger.warning(f"{self._name}: {len(listeners) - len(failures)} successful, {len(failures)} failed listeners")
            raise ListenerDispatchError(failures)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} listeners={len(self._registry)}>"


def join_remove_listeners(*removers: EventListenerRemover) -> EventListenerRemover:
    """Combine several removers into one.

    The returned function calls each remover once, in the order given. Removers
    are idempotent, so calling the joined remover again is harmless. A remover
    that raises does not stop the others; its exception is re-raised after the
    last one ran (as an ``ExceptionGroup`` if several failed).

    Example:
        ```python
        remove_all = join_remove_listeners(
            oven.on_bake.subscribe(on_bake),
            oven.on_temperature.subscribe(on_temperature),
        )
        remove_all()
        ```
    """

    def remove_all() -> None:
        errors: list[Exception] = []
        for remove in removers:
            try:
                remove()
            except Exception as e:
                errors.append(e)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise ExceptionGroup(f"{len(errors)} removers failed", errors)

    return remove_all
