"""Facade: one simple entry point over several subsystems."""

from __future__ import annotations


class SubSystemA:
    """First subsystem."""

    def operation_a(self) -> str:
        """Carry out subsystem A's operation and return its report."""
        report = "SubSystemA::OperationA"
        print(report)
        return report


class SubSystemB:
    """Second subsystem."""

    def operation_b(self) -> str:
        """Carry out subsystem B's operation and return its report."""
        report = "SubSystemB::OperationB"
        print(report)
        return report


class Facade:
    """Runs both subsystems through a single call."""

    def __init__(self) -> None:
        self._subsystem_a = SubSystemA()
        self._subsystem_b = SubSystemB()

    def operation(self) -> None:
        """Run subsystem A, then subsystem B."""
        self._subsystem_a.operation_a()
        self._subsystem_b.operation_b()


class AdditionalFacade(Facade):
    """A facade with one more operation."""

    def additional_operation(self) -> None:
        """Run the basic operation, then the additional step."""
        self.operation()
        print("AdditionalFacade::AdditionalOperation")


def main(argv: list[str] | None = None) -> int:
    """Run the facade's operations."""
    facade: Facade = AdditionalFacade()
    facade.operation()
    AdditionalFacade().additional_operation()
    return 0