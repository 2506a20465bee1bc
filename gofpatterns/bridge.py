"""Bridge: separate an abstraction from the implementation it works through."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementation(ABC):
    """The operations an abstraction relies on."""

    @abstractmethod
    def method1(self) -> str:
        """Carry out the first primitive operation and return its report."""

    @abstractmethod
    def method2(self) -> str:
        """Carry out the second primitive operation and return its report."""


class ConcreteImplementation(Implementation):
    """An implementation that reports each operation."""

    def method1(self) -> str:
        report = "ConcreteImplementations::Method1"
        print(report)
        return report

    def method2(self) -> str:
        report = "ConcreteImplementations::Method2"
        print(report)
        return report


class Abstraction(ABC):
    """High-level feature built on an implementation."""

    def __init__(self, implementation: Implementation) -> None:
        self._implementation = implementation

    @abstractmethod
    def feature1(self) -> None:
        """Carry out the first feature."""


class RefinedAbstraction(Abstraction):
    """An abstraction with a second feature."""

    @abstractmethod
    def feature2(self) -> None:
        """Carry out the second feature."""


class ConcreteAbstraction(Abstraction):
    """Frames the implementation's first operation."""

    def feature1(self) -> None:
        print("===ConcreteAbstraction::Feature1===")
        self._implementation.method1()
        print("===================================")


class ConcreteRefinedAbstraction(RefinedAbstraction):
    """Frames each of the implementation's operations."""

    def feature1(self) -> None:
        print("===ConcreteRefinedAbstraction::Feature1===")
        self._implementation.method1()
        print("==========================================")

    def feature2(self) -> None:
        print("===ConcreteRefinedAbstraction::Feature2===")
        self._implementation.method2()
        print("==========================================")


def main(argv: list[str] | None = None) -> int:
    """Run features of both abstractions over concrete implementations."""
    abstraction: Abstraction = ConcreteAbstraction(ConcreteImplementation())
    abstraction.feature1()

    refined: RefinedAbstraction = ConcreteRefinedAbstraction(ConcreteImplementation())
    abstraction.feature1()
    refined.feature2()
    return 0