"""Singleton: a class with exactly one instance."""

from __future__ import annotations

import threading


class Singleton:
    """Has a single shared instance, reached through instance()."""

    _instance: Singleton | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        raise TypeError("Singleton cannot be constructed directly; use Singleton.instance()")

    @classmethod
    def instance(cls) -> Singleton:
        """Return the one shared instance, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = object.__new__(cls)
        return cls._instance

    def __copy__(self) -> Singleton:
        """Copying yields the shared instance, so no second instance exists."""
        return type(self).instance()

    def __deepcopy__(self, memo: dict) -> Singleton:
        """Deep copying yields the shared instance, so no second instance exists."""
        shared = type(self).instance()
        memo[id(self)] = shared
        return shared

    def __reduce__(self):
        """Unpickling resolves to the shared instance."""
        return (type(self).instance, ())


def main(argv: list[str] | None = None) -> int:
    """Obtain the singleton instance."""
    Singleton.instance()
    return 0