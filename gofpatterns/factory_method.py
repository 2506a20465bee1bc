"""Factory method: subclasses decide which product to create."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """Something a creator makes."""

    @abstractmethod
    def describe(self) -> str:
        """Return the product's name."""


class ProductA(Product):
    """Product made by CreatorA."""

    def describe(self) -> str:
        return "ProductA"


class ProductB(Product):
    """Product made by CreatorB."""

    def describe(self) -> str:
        return "ProductB"


class Creator(ABC):
    """Declares the factory method."""

    @abstractmethod
    def create_product(self) -> Product:
        """Return a new product."""


class CreatorA(Creator):
    """Creates ProductA."""

    def create_product(self) -> Product:
        return ProductA()


class CreatorB(Creator):
    """Creates ProductB."""

    def create_product(self) -> Product:
        return ProductB()


class Client:
    """Obtains products through a creator."""

    def __init__(self, creator: Creator) -> None:
        self._creator = creator

    def get_product(self) -> Product:
        """Return a new product from the creator."""
        return self._creator.create_product()


def main(argv: list[str] | None = None) -> int:
    """Create one product with each creator and print their names."""
    product_a = Client(CreatorA()).get_product()
    product_b = Client(CreatorB()).get_product()
    print(product_a.describe())
    print(product_b.describe())
    return 0