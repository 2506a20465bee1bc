import pytest

from gofpatterns.builder import Builder, Builder1, Builder2, ProductA, ProductB, main


def _run_steps(builder):
    builder.set_step_a(1)
    builder.set_step_b(2, "TWO")
    builder.set_step_c()
    return builder.build()


def test_builder1_steps():
    product = _run_steps(Builder1())
    assert isinstance(product, ProductA)
    assert product.items == ["StepA", "1", "StepB", "2", "TWO", "StepC"]


def test_builder2_steps():
    product = _run_steps(Builder2())
    assert isinstance(product, ProductB)
    assert product.items == ["StepA*", "1", "StepB*", "2", "TWO", "StepC*"]


@pytest.mark.parametrize("builder_type", [Builder1, Builder2])
def test_build_returns_independent_copy(builder_type):
    builder = builder_type()
    builder.set_step_c()
    first = builder.build()
    builder.set_step_a(7)
    second = builder.build()
    assert len(first.items) == 1
    assert second.items[: len(first.items)] == first.items
    assert len(second.items) == 3


@pytest.mark.parametrize("builder_type", [Builder1, Builder2])
def test_reset_clears_product(builder_type):
    builder = builder_type()
    builder.set_step_b(3, "x")
    builder.reset()
    assert builder.build().items == []


def test_describe_frames_items():
    product = ProductA()
    product.configure("alpha")
    lines = product.describe().splitlines()
    assert lines == ["===ProductA===", "alpha", "=============="]


def test_describe_product_b_header():
    product = ProductB()
    assert product.describe().splitlines() == ["===ProductB===", "=============="]


def test_builder_is_abstract():
    with pytest.raises(TypeError):
        Builder()


def test_main_prints_both_products(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "===ProductA==="
    assert lines[1:7] == ["StepA", "1", "StepB", "2", "TWO", "StepC"]
    assert lines[8] == "===ProductB==="
    assert lines[9:15] == ["StepA*", "1", "StepB*", "2", "TWO", "StepC*"]
    assert len(lines) == 16