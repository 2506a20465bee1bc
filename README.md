# gofpatterns

Compact, self-contained examples of the classic creational and structural
design patterns. Each pattern lives in its own module. You can import it
and use it from your own code, and each module has a small demo that runs
from the command line.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Patterns

### Creational

| Module | Main names |
| --- | --- |
| `gofpatterns.abstract_factory` | `Creator`, `Creator1`, `Creator2`, `Client`, `ProductA`, `ProductB`, `ProductA1`, `ProductA2`, `ProductB1`, `ProductB2` |
| `gofpatterns.builder` | `Builder`, `Builder1`, `Builder2`, `ProductA`, `ProductB` |
| `gofpatterns.factory_method` | `Creator`, `CreatorA`, `CreatorB`, `Client`, `Product`, `ProductA`, `ProductB` |
| `gofpatterns.prototype` | `Cloneable`, `Prototype`, `SubPrototype` |
| `gofpatterns.singleton` | `Singleton` |

### Structural

| Module | Main names |
| --- | --- |
| `gofpatterns.adapter` | `Client`, `Service`, `Adapter`, `Data`, `SpecificData` |
| `gofpatterns.bridge` | `Implementation`, `ConcreteImplementation`, `Abstraction`, `RefinedAbstraction`, `ConcreteAbstraction`, `ConcreteRefinedAbstraction` |
| `gofpatterns.composite` | `Component`, `Leaf`, `Composite` |
| `gofpatterns.decorator` | `Component`, `ConcreteComponent`, `BaseDecorator`, `ConcreteDecorator` |
| `gofpatterns.facade` | `SubSystemA`, `SubSystemB`, `Facade`, `AdditionalFacade` |
| `gofpatterns.flyweight` | `Flyweight`, `FlyweightFactory`, `Context` |

## Using the library

Abstract factory: a client asks its creator for products of one family.
`describe()` returns the product's name.

```python
from gofpatterns.abstract_factory import Client, Creator1

client = Client(Creator1())
print(client.get_product_a().describe())  # ProductA1
print(client.get_product_b().describe())  # ProductB1
```

Factory method: each creator decides which product it makes.

```python
from gofpatterns.factory_method import Client, CreatorB

print(Client(CreatorB()).get_product().describe())  # ProductB
```

Builder: you add the steps one at a time. `build()` returns a copy of the
product assembled so far, and `reset()` starts again with an empty product.

```python
from gofpatterns.builder import Builder1

builder = Builder1()
builder.set_step_a(1)
builder.set_step_b(2, "TWO")
builder.set_step_c()
product = builder.build()
print(product.items)       # ['StepA', '1', 'StepB', '2', 'TWO', 'StepC']
print(product.describe())  # the items framed by a header and a footer
```

Prototype: `clone()` returns a copy of the same class with the same fields.

```python
from gofpatterns.prototype import SubPrototype

original = SubPrototype(2.0, "two", 1, "one")
duplicate = original.clone()
print(duplicate.describe())
```

Singleton: every call to `instance()` returns the same object. Calling
`Singleton()` directly raises `TypeError`. Copying, deep-copying or
unpickling also gives back the shared instance.

```python
from gofpatterns.singleton import Singleton

assert Singleton.instance() is Singleton.instance()
```

Adapter: the adapter turns a `Data` request into the `SpecificData` the
service expects. It returns the service's status code, which is `0` on
success.

```python
from gofpatterns.adapter import Adapter, Data, Service

code = Adapter(Service()).request(Data(12345, 0))  # prints "Request: 12345 0"
```

Bridge: an abstraction works through an implementation. The implementation's
`method1()` and `method2()` print their report and also return it.

```python
from gofpatterns.bridge import ConcreteImplementation, ConcreteRefinedAbstraction

ConcreteRefinedAbstraction(ConcreteImplementation()).feature2()
```

Composite: a tree of leaves and composites runs as one component.
`remove()` drops every occurrence of a child. `children()` returns a copy
of the child list.

```python
from gofpatterns.composite import Composite, Leaf

root = Composite()
root.add(Leaf(1))
branch = Composite()
branch.add(Leaf(2))
root.add(branch)
root.execute()  # prints "1 Leaf::Execute" then "2 Leaf::Execute"
```

Decorator: each decorator prints a frame around the component it wraps.

```python
from gofpatterns.decorator import ConcreteComponent, ConcreteDecorator

ConcreteDecorator(ConcreteComponent()).execute()
```

Facade: one call runs both subsystems in order. The subsystems' operations
print their report and also return it.

```python
from gofpatterns.facade import AdditionalFacade

AdditionalFacade().additional_operation()
```

Flyweight: the factory shares one flyweight per key among many contexts.

```python
from gofpatterns.flyweight import Context, FlyweightFactory

factory = FlyweightFactory()
shared = factory.get_flyweight(1)
assert shared is factory.get_flyweight(1)
print(Context(10, shared).describe_state())  # State: 10 Repeated data: 1
```

## Command-line demos

Each pattern has a demo command. It walks through a typical use and prints
the output:

```
gofpatterns-abstract-factory
gofpatterns-builder
gofpatterns-factory-method
gofpatterns-prototype
gofpatterns-singleton
gofpatterns-adapter
gofpatterns-bridge
gofpatterns-composite
gofpatterns-decorator
gofpatterns-facade
gofpatterns-flyweight
```

The demos take no options. `gofpatterns-singleton` only obtains the shared
instance and prints nothing.

Requires Python 3.10 or later. There are no third-party dependencies.