"""Flyweight: share the repeated part of many objects' state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Flyweight:
    """State shared between many contexts."""

    repeated_data: int


class FlyweightFactory:
    """Hands out one shared flyweight per key."""

    def __init__(self) -> None:
        self._flyweights: dict[int, Flyweight] = {}

    def get_flyweight(self, key: int) -> Flyweight:
        """Return the flyweight for key, creating it on first request."""
        if key not in self._flyweights:
            self._flyweights[key] = Flyweight(key)
        return self._flyweights[key]


@dataclass
class Context:
    """Per-object state paired with a shared flyweight."""

    state: int
    flyweight: Flyweight

    def describe_state(self) -> str:
        """Return the own state together with the shared data."""
        return f"State: {self.state} Repeated data: {self.flyweight.repeated_data}"


def main(argv: list[str] | None = None) -> int:
    """Share one flyweight among three contexts and print them."""
    factory = FlyweightFactory()
    flyweight = factory.get_flyweight(1)

    contexts = [Context(state, flyweight) for state in (1, 2, 3)]
    for context, state in zip(contexts, (10, 20, 30)):
        context.state = state
    for context in contexts:
        print(context.describe_state())
    return 0