[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gofpatterns"
version = "0.1.0"
description = "Small, runnable examples of the classic creational and structural design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "gang-of-four",
    "abstract-factory",
    "builder",
    "factory-method",
    "prototype",
    "singleton",
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "flyweight",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gofpatterns-abstract-factory = "gofpatterns.abstract_factory:main"
gofpatterns-builder = "gofpatterns.builder:main"
gofpatterns-factory-method = "gofpatterns.factory_method:main"
gofpatterns-prototype = "gofpatterns.prototype:main"
gofpatterns-singleton = "gofpatterns.singleton:main"
gofpatterns-adapter = "gofpatterns.adapter:main"
gofpatterns-bridge = "gofpatterns.bridge:main"
gofpatterns-composite = "gofpatterns.composite:main"
gofpatterns-decorator = "gofpatterns.decorator:main"
gofpatterns-facade = "gofpatterns.facade:main"
gofpatterns-flyweight = "gofpatterns.flyweight:main"

[tool.hatch.build.targets.wheel]
packages = ["gofpatterns"]

[tool.hatch.build.targets.sdist]
include = ["gofpatterns", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
