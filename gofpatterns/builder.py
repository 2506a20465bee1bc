"""Builder: assemble a product step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

_FOOTER = "=============="


@dataclass
class ProductA:
    """Product holding the configuration lines added so far."""

    items: list[str] = field(default_factory=list)

    def configure(self, item: str) -> None:
        """Append one configuration line."""
        self.items.append(item)

    def describe(self) -> str:
        """Return the product's configuration framed by header and footer."""
        return "\n".join(["===ProductA===", *self.items, _FOOTER])


@dataclass
class ProductB:
    """Product holding the configuration lines added so far."""

    items: list[str] = field(default_factory=list)

    def configure(self, item: str) -> None:
        """Append one configuration line."""
        self.items.append(item)

    def describe(self) -> str:
        """Return the product's configuration framed by header and footer."""
        return "\n".join(["===ProductB===", *self.items, _FOOTER])


class Builder(ABC):
    """Steps for assembling a product."""

    @abstractmethod
    def reset(self) -> None:
        """Start over with an empty product."""

    @abstractmethod
    def set_step_a(self, param: int) -> None:
        """Apply step A."""

    @abstractmethod
    def set_step_b(self, param: int, param2: str) -> None:
        """Apply step B."""

    @abstractmethod
    def set_step_c(self) -> None:
        """Apply step C."""

    @abstractmethod
    def build(self):
        """Return a copy of the product assembled so far."""


class Builder1(Builder):
    """Builds a ProductA."""

    def __init__(self) -> None:
        self._product = ProductA()

    def reset(self) -> None:
        self._product = ProductA()

    def set_step_a(self, param: int) -> None:
        self._product.configure("StepA")
        self._product.configure(str(param))

    def set_step_b(self, param: int, param2: str) -> None:
        self._product.configure("StepB")
        self._product.configure(str(param))
        self._product.configure(param2)

    def set_step_c(self) -> None:
        self._product.configure("StepC")

    def build(self) -> ProductA:
        return ProductA(list(self._product.items))


class Builder2(Builder):
    """Builds a ProductB."""

    def __init__(self) -> None:
        self._product = ProductB()

    def reset(self) -> None:
        self._product = ProductB()

    def set_step_a(self, param: int) -> None:
        self._product.configure("StepA*")
        self._product.configure(str(param))

    def set_step_b(self, param: int, param2: str) -> None:
        self._product.configure("StepB*")
        self._product.configure(str(param))
        self._product.configure(param2)

    def set_step_c(self) -> None:
        self._product.configure("StepC*")

    def build(self) -> ProductB:
        return ProductB(list(self._product.items))


def _assemble(builder: Builder):
    builder.set_step_a(1)
    builder.set_step_b(2, "TWO")
    builder.set_step_c()
    return builder.build()


def main(argv: list[str] | None = None) -> int:
    """Assemble one product with each builder and print both."""
    product1 = _assemble(Builder1())
    product2 = _assemble(Builder2())
    print(product1.describe())
    print(product2.describe())
    return 0