import pytest

from gofpatterns.factory_method import (
    Client,
    Creator,
    CreatorA,
    CreatorB,
    Product,
    ProductA,
    ProductB,
    main,
)


@pytest.mark.parametrize(
    "creator, product_type, name",
    [(CreatorA(), ProductA, "ProductA"), (CreatorB(), ProductB, "ProductB")],
)
def test_client_gets_creator_product(creator, product_type, name):
    product = Client(creator).get_product()
    assert type(product) is product_type
    assert product.describe() == name


def test_each_call_returns_new_product():
    client = Client(CreatorA())
    products = [client.get_product() for _ in range(3)]
    assert len({id(product) for product in products}) == 3
    assert [product.describe() for product in products] == ["ProductA"] * 3


@pytest.mark.parametrize("abstract", [Creator, Product])
def test_abstract_bases_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["ProductA", "ProductB"]