"""Serialize registered model instances into JSON:API resource objects."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from jsonapi_serializer.core.exceptions import MissingIdentifierError
from jsonapi_serializer.core.registry import SchemaRegistry
from jsonapi_serializer.core.values import (
    Empty,
    Identifier,
    InstanceList,
    RelationshipValue,
    SingleInstance,
    resolve_relationship_value,
)
from jsonapi_serializer.schemas.model import ModelSchema, RelationshipSchema

log = logging.getLogger(__name__)


class JSONAPISerializer:
    """Build resource objects and compound documents from model instances.

    Schemas and instance fields both come from ``registry``, so the way an
    instance's properties are read is decided by the registry it belongs to.
    """

    def __init__(self, registry: SchemaRegistry, *, base_url: str = "") -> None:
        self.registry = registry
        self.base_url = base_url

    def to_resource(self, instance: Any, *, require_id: bool = True) -> dict[str, Any]:
        """Serialize a model instance into a JSON:API resource object."""
        schema = self.registry.schema_for(instance)
        fields = self.get_fields(instance)
        if require_id and "id" not in fields:
            raise MissingIdentifierError()

        resource: dict[str, Any] = {"type": schema.singular}
        resource_id = self.get_id(instance)
        if resource_id is not None:
            resource["id"] = resource_id
        resource["attributes"] = self.get_attributes(schema, fields)

        relationships = self.get_relationships(instance, schema=schema, fields=fields)
        if relationships:
            resource["relationships"] = relationships
        log.debug("Built %s resource %s", schema.singular, resource_id)
        return resource

    def to_many(self, instances: Iterable[Any]) -> list[dict[str, Any]]:
        """Serialize a collection of instances; each must carry an id."""
        return [self.to_resource(instance) for instance in instances]

    def get_fields(self, instance: Any) -> dict[str, Any]:
        """Return the instance's own properties, as read by the registry."""
        return self.registry.get_fields(instance)

    def get_id(self, instance: Any) -> str | None:
        """Return the resource id as a string, or None when unset."""
        value = self.get_fields(instance).get("id")
        return None if value is None else str(value)

    def get_attributes(self, schema: ModelSchema, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Return the declared, public properties as attributes."""
        attributes: dict[str, Any] = {}
        for key, value in fields.items():
            if key == "id":
                continue
            property_schema = schema.properties.get(key)
            if property_schema is not None and property_schema.is_public:
                attributes[key] = value
        return attributes

    def get_relationships(
        self,
        instance: Any,
        *,
        schema: ModelSchema | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> dict[str, dict[str, Any]]:
        """Return a relationship object for every declared relationship."""
        schema = schema or self.registry.schema_for(instance)
        fields = self.get_fields(instance) if fields is None else fields
        resource_id = self.get_id(instance)
        return {
            key: self._build_relationship(schema.plural, resource_id, key, declared, fields.get(key))
            for key, declared in schema.relationships.items()
        }

    def relationship_object(self, instance: Any, relationship_name: str) -> dict[str, Any] | None:
        """Build the relationship object for one relationship, None if undeclared."""
        schema = self.registry.schema_for(instance)
        declared = schema.relationships.get(relationship_name)
        if declared is None:
            return None
        return self._build_relationship(
            schema.plural,
            self.get_id(instance),
            relationship_name,
            declared,
            self.get_fields(instance).get(relationship_name),
        )

    def collect_included(
        self, instance: Any, *, _ancestors: frozenset[int] = frozenset()
    ) -> list[dict[str, Any]]:
        """Return resource objects for every related instance, depth first.

        Each related instance contributes its own resource (when it has an id)
        followed by everything reachable from it. Instances already being
        expanded higher up the current path are skipped.
        """
        schema = self.registry.schema_for(instance)
        fields = self.get_fields(instance)
        ancestors = _ancestors | {id(instance)}
        included: list[dict[str, Any]] = []

        for key in schema.relationships:
            value = resolve_relationship_value(fields.get(key), self.registry)
            for related in value.instances():
                if id(related.instance) in ancestors:
                    log.debug("Skipping cyclic %s reference via %r", related.schema.singular, key)
                    continue
                if self.get_id(related.instance) is not None:
                    included.append(self.to_resource(related.instance))
                included.extend(self.collect_included(related.instance, _ancestors=ancestors))
        return included

    def _build_relationship(
        self,
        plural: str,
        resource_id: str | None,
        key: str,
        declared: RelationshipSchema,
        nested: Any,
    ) -> dict[str, Any]:
        relationship: dict[str, Any] = {}
        if resource_id:
            relationship["links"] = self._relationship_links(plural, resource_id, key)
        value = resolve_relationship_value(nested, self.registry)
        data = self._relationship_data(value, declared.type)
        if data is not None:
            relationship["data"] = data
        return relationship

    def _relationship_links(self, plural: str, resource_id: str, relationship: str) -> dict[str, str]:
        base = self.base_url.rstrip("/")
        resource_path = f"{base}/{plural}/{resource_id}"
        return {
            "self": f"{resource_path}/relationships/{relationship}",
            "related": f"{resource_path}/{relationship}",
        }

    def _relationship_data(self, value: RelationshipValue, type_name: str) -> Any:
        if isinstance(value, Empty):
            return None
        if isinstance(value, InstanceList):
            return [self._identifier(member, type_name) for member in value.members]
        return self._identifier(value, type_name)

    def _identifier(self, member: Identifier | SingleInstance, type_name: str) -> dict[str, Any]:
        if isinstance(member, Identifier):
            return {"id": member.id, "type": type_name}
        related_id = self.get_id(member.instance)
        if related_id is None:
            return {"type": type_name}
        return {"id": related_id, "type": type_name}
