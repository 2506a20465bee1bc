"""Prototype: objects that copy themselves."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Cloneable(ABC):
    """An object that can produce a copy of itself."""

    @abstractmethod
    def clone(self) -> Cloneable:
        """Return a copy of this object."""


@dataclass
class Prototype(Cloneable):
    """A cloneable object with two fields."""

    field1: int
    field2: str

    def clone(self) -> Prototype:
        return copy.copy(self)

    def describe(self) -> str:
        """Return the fields, one per line."""
        return f"field1: {self.field1}\nfield2: {self.field2}"


@dataclass(init=False)
class SubPrototype(Prototype):
    """A prototype with two more fields of its own."""

    sub_field1: float
    sub_field2: str

    def __init__(self, sub_field1: float, sub_field2: str, field1: int, field2: str) -> None:
        super().__init__(field1, field2)
        self.sub_field1 = float(sub_field1)
        self.sub_field2 = sub_field2

    def clone(self) -> SubPrototype:
        return copy.copy(self)

    def describe(self) -> str:
        return (
            f"{super().describe()}\n"
            f"subfield1: {self.sub_field1:g}\n"
            f"subfield2: {self.sub_field2}"
        )


def main(argv: list[str] | None = None) -> int:
    """Print two prototypes and their clones."""
    prototype = Prototype(1, "one")
    print(prototype.describe())
    print(prototype.clone().describe())

    sub_prototype = SubPrototype(2, "two", 1, "one")
    print(sub_prototype.describe())
    print(sub_prototype.clone().describe())
    return 0