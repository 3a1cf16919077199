"""
Opaque event name tokens.

A `Symbol` only ever equals itself, so two parts of a program can each
create `Symbol("ready")` and never see each other's events. `Symbol.for_key`
hands out shared tokens from a process-wide registry when sharing is wanted.
"""
from threading import Lock
from typing import Dict, Optional


class Symbol:
    __slots__ = ("description",)

    _registry: Dict[str, "Symbol"] = {}
    _lock: Lock = Lock()

    def __init__(self, description: Optional[str] = None):
        self.description = description

    @classmethod
    def for_key(cls, key: str) -> "Symbol":
        """Return the registered symbol for `key`, creating it on first use."""
        with cls._lock:
            symbol = cls._registry.get(key)
            if symbol is None:
                symbol = cls._registry[key] = cls(key)
            return symbol

    @classmethod
    def key_for(cls, symbol: "Symbol") -> Optional[str]:
        """Return the registry key of `symbol`, or None for unregistered symbols."""
        key = symbol.description
        if key is not None and cls._registry.get(key) is symbol:
            return key
        return None

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description})"
