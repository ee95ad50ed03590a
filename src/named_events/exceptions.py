"""Exceptions raised by event sources.

All errors inherit from ``NamedEventsError`` so callers can catch anything
originating in this package with a single clause:

```python
try:
    source.trigger()
except NamedEventsError as e:
    logger.error(f"Event error: {e}")
```

Listener exceptions in fail-fast mode are *not* wrapped; they reach the caller
of ``trigger`` unchanged.
"""

from collections.abc import Callable
from typing import Any


class NamedEventsError(Exception):
    """Base exception for all event source errors."""


class ListenerRegistrationError(NamedEventsError):
    """Raised when a listener cannot be registered.

    This occurs when the object passed to ``subscribe`` or ``add_listener``
    is not callable.
    """

    def __init__(self, listener: Any):
        self.listener = listener
        super().__init__(f"Listener must be callable, got: {type(listener).__name__}")


class ListenerDispatchError(NamedEventsError):
    """Raised after an isolated dispatch in which one or more listeners failed.

    Only raised when the source has no ``on_listener_error`` handler. Every
    listener has already been invoked by the time this is raised.
    """

    def __init__(self, failures: list[tuple[Callable[..., Any], Exception]]):
        self.failures = failures
        summary = ", ".join(f"{type(exc).__name__}: {exc}" for _, exc in failures)
        super().__init__(f"{len(failures)} listener(s) failed: {summary}")
