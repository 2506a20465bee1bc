import pytest

from gofpatterns.prototype import Cloneable, Prototype, SubPrototype, main


def test_prototype_describe():
    assert Prototype(1, "one").describe() == "field1: 1\nfield2: one"


def test_sub_prototype_describe_extends_base():
    sub = SubPrototype(2, "two", 1, "one")
    lines = sub.describe().splitlines()
    assert lines[:2] == Prototype(1, "one").describe().splitlines()
    assert lines[2:] == ["subfield1: 2", "subfield2: two"]


def test_sub_prototype_fractional_field():
    sub = SubPrototype(2.5, "x", 0, "y")
    assert sub.describe().splitlines()[2] == "subfield1: 2.5"


@pytest.mark.parametrize(
    "original", [Prototype(1, "one"), SubPrototype(2, "two", 1, "one")]
)
def test_clone_is_equal_copy_of_same_type(original):
    cloned = original.clone()
    assert cloned == original
    assert cloned is not original
    assert type(cloned) is type(original)
    assert cloned.describe() == original.describe()


def test_clone_is_independent():
    original = SubPrototype(2, "two", 1, "one")
    cloned = original.clone()
    cloned.field1 = 99
    cloned.sub_field2 = "changed"
    assert original.field1 == 1
    assert original.sub_field2 == "two"


def test_cloneable_is_abstract():
    with pytest.raises(TypeError):
        Cloneable()


def test_main_prints_originals_and_clones(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0:2] == lines[2:4]
    assert lines[4:8] == lines[8:12]
    assert lines[0:2] == lines[4:6]