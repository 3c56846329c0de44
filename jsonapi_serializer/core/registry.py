"""Schema lookup passed to the serializer in place of model introspection."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from jsonapi_serializer.core.exceptions import UnregisteredModelError
from jsonapi_serializer.schemas.model import ModelSchema, PropertySchema, RelationshipSchema

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=type)


class SchemaRegistry:
    """Map model classes to their :class:`ModelSchema`.

    Lookups walk the instance's MRO, so subclasses of a registered model
    resolve to the nearest registered base.
    """

    def __init__(self) -> None:
        self._schemas: dict[type, ModelSchema] = {}

    def register(self, model: type, schema: ModelSchema | Mapping[str, Any]) -> ModelSchema:
        """Register ``schema`` for ``model`` and return the validated schema."""
        if not isinstance(schema, ModelSchema):
            schema = ModelSchema.model_validate(dict(schema))
        self._schemas[model] = schema
        log.debug("Registered %s as %r", model.__qualname__, schema.singular)
        return schema

    def define(
        self,
        singular: str,
        *,
        plural: str | None = None,
        properties: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> Callable[[ModelT], ModelT]:
        """Class decorator registering a model under ``singular``/``plural``.

        Property and relationship entries may be schema objects or plain
        mappings such as ``{"public": False}`` and ``{"type": "child", "hasMany": True}``.
        """
        schema = ModelSchema(
            singular=singular,
            plural=plural or "",
            properties={
                name: entry if isinstance(entry, PropertySchema) else PropertySchema.model_validate(entry)
                for name, entry in (properties or {}).items()
            },
            relationships={
                name: entry if isinstance(entry, RelationshipSchema) else RelationshipSchema.model_validate(entry)
                for name, entry in (relationships or {}).items()
            },
        )

        def decorator(model: ModelT) -> ModelT:
            self.register(model, schema)
            return model

        return decorator

    def get(self, model: type) -> ModelSchema | None:
        """Return the schema for a class or its nearest registered base."""
        for klass in model.__mro__:
            schema = self._resolve(klass)
            if schema is not None:
                return schema
        return None

    def lookup(self, instance: Any) -> ModelSchema | None:
        """Return the schema for an instance, or None if it is not a model."""
        if instance is None or isinstance(instance, (str, bytes, int, float)):
            return None
        return self.get(type(instance))

    def schema_for(self, instance: Any) -> ModelSchema:
        """Like :meth:`lookup` but raise for unregistered instances."""
        schema = self.lookup(instance)
        if schema is None:
            raise UnregisteredModelError(type(instance))
        return schema

    def get_fields(self, instance: Any) -> dict[str, Any]:
        """Return an instance's own properties in definition order.

        Own properties are the ``__dict__`` entries not starting with an underscore.
        """
        return {
            key: value
            for key, value in vars(instance).items()
            if not key.startswith("_")
        }

    def __contains__(self, model: object) -> bool:
        return isinstance(model, type) and self.get(model) is not None

    def _resolve(self, model: type) -> ModelSchema | None:
        return self._schemas.get(model)
