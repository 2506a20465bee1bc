"""Composite: treat single objects and groups of them alike."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Anything that can be executed, alone or as part of a tree."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out this component's work."""


class Leaf(Component):
    """A component with no children."""

    def __init__(self, id: int) -> None:
        self.id = id

    def execute(self) -> None:
        print(f"{self.id} Leaf::Execute")


class Composite(Component):
    """A component made of other components, executed in order."""

    def __init__(self) -> None:
        self._components: list[Component] = []

    def add(self, component: Component) -> None:
        """Append a child component."""
        self._components.append(component)

    def remove(self, component: Component) -> None:
        """Remove every occurrence of the given child; absent ones are ignored."""
        self._components = [c for c in self._components if c is not component]

    def children(self) -> list[Component]:
        """Return a copy of the list of children."""
        return list(self._components)

    def execute(self) -> None:
        for component in self._components:
            component.execute()


def main(argv: list[str] | None = None) -> int:
    """Build a small tree of leaves and composites and execute it."""
    leaves = {n: Leaf(n) for n in range(1, 9)}
    composite1, composite2, composite3, composite4 = (Composite() for _ in range(4))

    for n in (1, 2, 3):
        composite1.add(leaves[n])
    for n in (4, 5):
        composite2.add(leaves[n])
    composite3.add(leaves[6])
    composite3.add(composite2)
    composite4.add(leaves[7])
    composite4.add(leaves[8])
    composite4.add(composite3)
    composite4.add(composite1)

    composite4.execute()
    return 0