"""Emitter error base class."""
from typing import Any


class EmitterError(Exception):

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

"""Raised when a listener or event name argument has the wrong type."""
class InvalidArgumentError(EmitterError, TypeError):
    def __init__(self, name: str, expected: str, received: Any):
        self.name = name
        self.received = received
        super().__init__(
            f'The "{name}" argument must be {expected}. Received type {type(received).__name__}'
        )

"""Raised when a max listeners value is negative or not a number.
        Attributes:
            received: the rejected value
"""
class RangeOutOfBoundsError(EmitterError, ValueError):
    def __init__(self, received: Any, name: str = "n"):
        self.received = received
        super().__init__(
            f'The value of "{name}" is out of range. It must be a non-negative number. Received {received!r}'
        )
