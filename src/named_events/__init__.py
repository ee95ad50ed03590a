"""Typed, synchronous event sources.

## Quick Start

```python
from named_events import create_event, create_value_backed_event

on_bake = create_event()
remove = on_bake.evt.subscribe(lambda: print("Shake'n Bake"))
on_bake.trigger()
remove()

speed = create_value_backed_event("slow")
speed.evt.add_listener(print)
speed.set_value("fast")
```

The package logs through loguru and is silent until ``setup_logging`` (or
``logger.enable("named_events")``) is called.
"""

from loguru import logger

from .core import Event, EventSource, join_remove_listeners
from .exceptions import ListenerDispatchError, ListenerRegistrationError, NamedEventsError
from .factory import create_custom_event, create_event, create_value_backed_event, create_value_event
from .logging import setup_logging
from .settings import NamedEventsSettings, get_settings
from .value import ValueBackedEventSource, ValueEvent, same_value

logger.disable(__name__)

__all__ = [
    "Event",
    "EventSource",
    "ListenerDispatchError",
    "ListenerRegistrationError",
    "NamedEventsError",
    "NamedEventsSettings",
    "ValueBackedEventSource",
    "ValueEvent",
    "create_custom_event",
    "create_event",
    "create_value_backed_event",
    "create_value_event",
    "get_settings",
    "join_remove_listeners",
    "same_value",
    "setup_logging",
]
