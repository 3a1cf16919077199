"""
Process-wide default for the max listeners warning threshold.

Every `EventEmitter` holds a handle to the single `ListenerCeiling` instance
and reads `value` whenever it checks a listener count, so a change here applies
to all emitters without their own override from that point on. Counts that are
already registered are not re-checked.
"""
from typing import Optional, Union
import logging

from Emitter.Utils.singleton import Singleton
from Emitter.Utility.env import get_env_max_listeners
from Emitter.Events.validators import validate_max_listeners

logger = logging.getLogger(__name__)


class ListenerCeiling(metaclass=Singleton):

    def __init__(self, env_file: Optional[str] = None):
        self._env_file = env_file
        self._initial = get_env_max_listeners(env_file)
        self._value = self._initial

    @property
    def value(self) -> Union[int, float]:
        return self._value

    @value.setter
    def value(self, n: Union[int, float]) -> None:
        self._value = validate_max_listeners(n)
        logger.debug("Default max listeners set to %s", n)

    def reset(self) -> None:
        """Restore the value read from the environment at construction time."""
        self._value = self._initial

    def reload(self, env_file: Optional[str] = None) -> Union[int, float]:
        if env_file is not None:
            self._env_file = env_file
        self._initial = get_env_max_listeners(self._env_file)
        self._value = self._initial
        return self._value


def get_default_max_listeners() -> Union[int, float]:
    return ListenerCeiling().value


def set_default_max_listeners(n: Union[int, float]) -> None:
    ListenerCeiling().value = n
