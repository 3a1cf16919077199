"""
Synchronous in-process EventEmitter.

Listeners are kept per event name in registration order and called on the
caller's thread when the name is emitted. Adding a listener first emits
`newListener`, so its handlers see the registry before the add. Removing one
(explicitly, or a once-listener right before it fires) emits `removeListener`
after the entry is gone.

During `emit` the live list is walked by index. A once-listener is deleted
before it is invoked and the index is not advanced, so the entry that moves
into its slot still runs. Listeners added while a pass is running may or may
not be reached by that pass.
"""
from typing import Any, Callable, Dict, List, Optional, Union
import math
import logging

from Emitter.Events.listener import OnceListener, Registration
from Emitter.Events.symbol import Symbol
from Emitter.Events.validators import validate_event_name, validate_listener, validate_max_listeners
from Emitter.Utility.ListenerCeiling import ListenerCeiling

logger = logging.getLogger(__name__)

NEW_LISTENER = "newListener"
REMOVE_LISTENER = "removeListener"
ERROR = "error"

EventName = Union[str, Symbol]
Listener = Callable[..., Any]


class _EmitterMeta(type):
    @property
    def default_max_listeners(cls) -> Union[int, float]:
        return ListenerCeiling().value

    @default_max_listeners.setter
    def default_max_listeners(cls, n: Union[int, float]) -> None:
        ListenerCeiling().value = n


class EventEmitter(metaclass=_EmitterMeta):

    def __init__(self, ceiling: Optional[ListenerCeiling] = None):
        self._events: Dict[EventName, List[Registration]] = {}
        self._max_listeners: Optional[Union[int, float]] = None
        self._ceiling = ceiling or ListenerCeiling()

    def emit(self, event_name: EventName, *args: Any) -> bool:
        registrations = self._events.get(event_name)
        if not registrations:
            return False

        index = 0
        while index < len(registrations):
            registration = registrations[index]
            if registration.once:
                del registrations[index]
                self.emit(REMOVE_LISTENER, event_name, registration.listener)
            else:
                index += 1
            registration.call(self, args)

        return True

    def _add(self, event_name: EventName, registration: Registration, prepend: bool) -> "EventEmitter":
        self.emit(NEW_LISTENER, event_name, registration.listener)

        registrations = self._events.setdefault(event_name, [])
        if prepend:
            registrations.insert(0, registration)
        else:
            registrations.append(registration)
        logger.debug("Added %s listener for %r (%d total)",
                     "once" if registration.once else "plain", event_name, len(registrations))

        max_listeners = self.get_max_listeners()
        count = len(registrations)
        if max_listeners != 0 and max_listeners != math.inf and count > max_listeners:
            logger.warning(
                "MaxListenersExceededWarning: Possible EventEmitter memory leak detected. "
                "%d %s listeners added. Use emitter.set_max_listeners() to increase limit",
                count, event_name,
            )

        return self

    def on(self, event_name: EventName, listener: Listener) -> "EventEmitter":
        validate_listener(listener)
        return self._add(event_name, Registration.plain(listener), prepend=False)

    add_listener = on

    def once(self, event_name: EventName, listener: Listener) -> "EventEmitter":
        validate_listener(listener)
        return self._add(event_name, Registration.wrapped(listener), prepend=False)

    def prepend_listener(self, event_name: EventName, listener: Listener) -> "EventEmitter":
        validate_listener(listener)
        return self._add(event_name, Registration.plain(listener), prepend=True)

    def prepend_once_listener(self, event_name: EventName, listener: Listener) -> "EventEmitter":
        validate_listener(listener)
        return self._add(event_name, Registration.wrapped(listener), prepend=True)

    def remove_listener(self, event_name: EventName, listener: Listener) -> "EventEmitter":
        """Remove the most recently added registration matching `listener`."""
        validate_listener(listener)
        registrations = self._events.get(event_name)
        if not registrations:
            return self

        for index in range(len(registrations) - 1, -1, -1):
            registration = registrations[index]
            if registration.matches(listener):
                del registrations[index]
                logger.debug("Removed listener for %r (%d left)", event_name, len(registrations))
                self.emit(REMOVE_LISTENER, event_name, registration.listener)
                break

        return self

    off = remove_listener

    def remove_all_listeners(self, event_name: Optional[EventName] = None) -> "EventEmitter":
        """Clear one event's listeners, or every event's when no name is given.

        No `removeListener` notifications are emitted. Names stay known to
        `event_names()`.
        """
        if event_name is not None:
            validate_event_name(event_name)
            if event_name in self._events:
                self._events[event_name] = []
        else:
            for name in self._events:
                self._events[name] = []
        return self

    def listener_count(self, event_name: EventName) -> int:
        return len(self._events.get(event_name, ()))

    def listeners(self, event_name: EventName) -> List[Listener]:
        return [registration.listener for registration in self._events.get(event_name, ())]

    def raw_listeners(self, event_name: EventName) -> List[Union[Listener, OnceListener]]:
        return [registration.raw for registration in self._events.get(event_name, ())]

    def event_names(self) -> List[EventName]:
        return list(self._events)

    def get_max_listeners(self) -> Union[int, float]:
        if self._max_listeners is not None:
            return self._max_listeners
        return self._ceiling.value

    def set_max_listeners(self, n: Union[int, float]) -> "EventEmitter":
        self._max_listeners = validate_max_listeners(n)
        return self
