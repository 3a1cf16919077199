"""
Dispatch context.

Listeners are called with only the emitted arguments. The emitter that is
dispatching to them is available through `current_emitter()` for as long as
the listener runs, nested emits included.
"""
from contextvars import ContextVar
from typing import Any, Callable, Optional, Sequence

_current_emitter: ContextVar[Optional[Any]] = ContextVar("current_emitter", default=None)


def current_emitter() -> Optional[Any]:
    return _current_emitter.get()


def invoke(listener: Callable[..., Any], context: Any, args: Sequence[Any]) -> Any:
    token = _current_emitter.set(context)
    try:
        return listener(*args)
    finally:
        _current_emitter.reset(token)
