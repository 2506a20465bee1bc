"""Decorator: wrap a component to add behaviour around it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that can be executed and wrapped."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out this component's work."""


class ConcreteComponent(Component):
    """The plain component being decorated."""

    def execute(self) -> None:
        print("ConcreteComponent")


class BaseDecorator(Component):
    """Frames the wrapped component's output."""

    def __init__(self, wrapped: Component) -> None:
        self._wrapped = wrapped

    def execute(self) -> None:
        print("===BaseDecorator===")
        self._wrapped.execute()
        print("===================")


class ConcreteDecorator(BaseDecorator):
    """Adds a further frame around the base decoration."""

    def execute(self) -> None:
        print("==ConcreteDecorator==")
        super().execute()
        print("=====================")


def main(argv: list[str] | None = None) -> int:
    """Decorate a component and execute it."""
    decorator = ConcreteDecorator(ConcreteComponent())
    decorator.execute()
    return 0