import math
from numbers import Real
from typing import Any, Callable, Union

from Emitter.Events.symbol import Symbol
from Emitter.Exception.EmitterError import InvalidArgumentError, RangeOutOfBoundsError


def validate_listener(listener: Any) -> Callable[..., Any]:
    if not callable(listener):
        raise InvalidArgumentError("listener", "callable", listener)
    return listener


def validate_event_name(event_name: Any) -> Union[str, Symbol]:
    if not isinstance(event_name, (str, Symbol)):
        raise InvalidArgumentError("eventName", "of type str or Symbol", event_name)
    return event_name


def validate_max_listeners(n: Any) -> Union[int, float]:
    # bool is a Real subclass, but True is not a listener count
    if isinstance(n, bool) or not isinstance(n, Real):
        raise RangeOutOfBoundsError(n)
    if math.isnan(n) or n < 0:
        raise RangeOutOfBoundsError(n)
    return n
