"""
Thread-safe Singleton metaclass for process-wide emitter settings.
"""
from threading import Lock
from typing import Type, Dict, Any


class Singleton(type):
    _instances: Dict[Type, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]

    def clear_instance(cls) -> None:
        """Forget the cached instance so the next call builds a fresh one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)
