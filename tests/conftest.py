from typing import Any

import pytest

from jsonapi_serializer import JSONAPIDocumentBuilder, SchemaRegistry


class Record:
    """Plain model instance: keyword arguments become own properties."""

    def __init__(self, **fields: Any) -> None:
        self.__dict__.update(fields)


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry()


@pytest.fixture
def models(registry: SchemaRegistry) -> dict[str, type]:
    @registry.define(
        "test",
        properties={"name": {"type": str}, "private": {"type": str, "public": False}},
        relationships={
            "children": {"type": "child", "hasMany": True},
            "child": {"type": "single"},
        },
    )
    class Model(Record):
        pass

    @registry.define("child", properties={"name": {"type": str}}, relationships={"toys": {"type": "toy", "hasMany": True}})
    class Child(Record):
        pass

    @registry.define("single", properties={"name": {"type": str}})
    class Single(Record):
        pass

    @registry.define("toy", plural="toys", properties={"label": {}})
    class Toy(Record):
        pass

    return {"Model": Model, "Child": Child, "Single": Single, "Toy": Toy}


@pytest.fixture
def builder(registry: SchemaRegistry) -> JSONAPIDocumentBuilder:
    return JSONAPIDocumentBuilder(registry)
