"""Shapes a relationship value can take, resolved once per relationship."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

from jsonapi_serializer.core.registry import SchemaRegistry
from jsonapi_serializer.schemas.model import ModelSchema


@dataclass(frozen=True)
class Empty:
    """No related value: absent, None, an empty string or an empty list."""

    def instances(self) -> Iterator["SingleInstance"]:
        return iter(())


@dataclass(frozen=True)
class Identifier:
    """A raw identifier standing in for a related resource."""

    value: Any

    @property
    def id(self) -> str:
        return str(self.value)

    def instances(self) -> Iterator["SingleInstance"]:
        return iter(())


@dataclass(frozen=True)
class SingleInstance:
    """A registered model instance."""

    instance: Any
    schema: ModelSchema

    def instances(self) -> Iterator["SingleInstance"]:
        yield self


@dataclass(frozen=True)
class InstanceList:
    """A to-many value; members are instances or raw identifiers."""

    members: tuple[Union[Identifier, SingleInstance], ...]

    def instances(self) -> Iterator[SingleInstance]:
        for member in self.members:
            yield from member.instances()


RelationshipValue = Union[Empty, Identifier, SingleInstance, InstanceList]


def _resolve_member(value: Any, registry: SchemaRegistry) -> Union[Identifier, SingleInstance]:
    schema = registry.lookup(value)
    if schema is None:
        return Identifier(value)
    return SingleInstance(value, schema)


def resolve_relationship_value(value: Any, registry: SchemaRegistry) -> RelationshipValue:
    """Classify the value stored under a relationship key."""
    if value is None or (isinstance(value, str) and not value):
        return Empty()
    if isinstance(value, (list, tuple)):
        if not value:
            return Empty()
        return InstanceList(tuple(_resolve_member(member, registry) for member in value))
    return _resolve_member(value, registry)
