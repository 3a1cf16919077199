"""
Listener entries stored by `EventEmitter`.

`OnceListener` marks a callback that fires at most once while keeping the
original callable reachable as `listener`. `Registration` is the tagged entry
the emitter keeps per event name: dispatch and removal switch on `once`
rather than inspecting the stored object's type.
"""
from dataclasses import dataclass
from typing import Any, Callable, Union

from Emitter.Events.context import invoke


class OnceListener:

    def __init__(self, listener: Callable[..., Any]):
        self.listener = listener

    def call(self, context: Any, *args: Any) -> Any:
        """Invoke the wrapped callable with `context` as the dispatching emitter."""
        return invoke(self.listener, context, args)

    def __call__(self, *args: Any) -> Any:
        return self.listener(*args)

    def __repr__(self) -> str:
        return f"<OnceListener {self.listener!r}>"

    def __str__(self) -> str:
        return str(self.listener)


@dataclass(frozen=True, eq=False)
class Registration:
    listener: Callable[..., Any]
    once: bool = False
    wrapper: Union[OnceListener, None] = None

    @classmethod
    def plain(cls, listener: Callable[..., Any]) -> "Registration":
        return cls(listener)

    @classmethod
    def wrapped(cls, listener: Callable[..., Any]) -> "Registration":
        return cls(listener, once=True, wrapper=OnceListener(listener))

    @property
    def raw(self) -> Union[Callable[..., Any], OnceListener]:
        """The object `raw_listeners()` reports: the wrapper for once entries."""
        return self.wrapper if self.once else self.listener

    def matches(self, listener: Any) -> bool:
        # == so a bound method fetched again from the same object still matches
        return self.listener == listener or (self.once and self.wrapper is listener)

    def call(self, context: Any, args: Any) -> Any:
        if self.once:
            return self.wrapper.call(context, *args)
        return invoke(self.listener, context, args)
