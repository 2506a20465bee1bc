"""Abstract factory: families of related products made by interchangeable creators."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProductA(ABC):
    """A product of the first kind."""

    @abstractmethod
    def describe(self) -> str:
        """Return the product's name."""


class ProductB(ABC):
    """A product of the second kind."""

    @abstractmethod
    def describe(self) -> str:
        """Return the product's name."""


class ProductA1(ProductA):
    """First-kind product of the first family."""

    def describe(self) -> str:
        return "ProductA1"


class ProductA2(ProductA):
    """First-kind product of the second family."""

    def describe(self) -> str:
        return "ProductA2"


class ProductB1(ProductB):
    """Second-kind product of the first family."""

    def describe(self) -> str:
        return "ProductB1"


class ProductB2(ProductB):
    """Second-kind product of the second family."""

    def describe(self) -> str:
        return "ProductB2"


class Creator(ABC):
    """Makes one product of each kind, all from the same family."""

    @abstractmethod
    def create_product_a(self) -> ProductA:
        """Return a new first-kind product."""

    @abstractmethod
    def create_product_b(self) -> ProductB:
        """Return a new second-kind product."""


class Creator1(Creator):
    """Creator of the first family."""

    def create_product_a(self) -> ProductA:
        return ProductA1()

    def create_product_b(self) -> ProductB:
        return ProductB1()


class Creator2(Creator):
    """Creator of the second family."""

    def create_product_a(self) -> ProductA:
        return ProductA2()

    def create_product_b(self) -> ProductB:
        return ProductB2()


class Client:
    """Obtains products without knowing which family they come from."""

    def __init__(self, creator: Creator) -> None:
        self._creator = creator

    def get_product_a(self) -> ProductA:
        """Return a new first-kind product from the creator."""
        return self._creator.create_product_a()

    def get_product_b(self) -> ProductB:
        """Return a new second-kind product from the creator."""
        return self._creator.create_product_b()


def main(argv: list[str] | None = None) -> int:
    """Build products from both families and print their names."""
    client1 = Client(Creator1())
    client2 = Client(Creator2())
    products = [
        client1.get_product_a(),
        client2.get_product_a(),
        client1.get_product_b(),
        client2.get_product_b(),
    ]
    for product in products:
        print(product.describe())
    return 0