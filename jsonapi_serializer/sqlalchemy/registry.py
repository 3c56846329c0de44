"""Derive model schemas from SQLAlchemy mapped classes."""

from __future__ import annotations

import logging
from typing import Any, Callable

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from jsonapi_serializer.core.registry import ModelT, SchemaRegistry
from jsonapi_serializer.schemas.model import ModelSchema, PropertySchema, RelationshipSchema

log = logging.getLogger(__name__)


class SQLAlchemySchemaRegistry(SchemaRegistry):
    """Schema registry for declarative SQLAlchemy models.

    Column attributes become properties; a column with ``info={"public": False}``
    is kept out of attributes. Mapper relationships become relationship
    schemas, typed with the singular name the target model is registered
    under. Schemas are derived on first lookup, once all mappers can be
    configured.
    """

    def __init__(self) -> None:
        super().__init__()
        self._models: dict[type, tuple[str, str]] = {}

    def register_model(
        self, model: type, *, singular: str | None = None, plural: str | None = None
    ) -> None:
        """Register a mapped class.

        ``singular`` defaults to the lowercased class name and ``plural`` to
        the table name.
        """
        singular = singular or model.__name__.lower()
        plural = plural or getattr(model, "__tablename__", None) or f"{singular}s"
        self._models[model] = (singular, plural)
        self._schemas.pop(model, None)

    def model(
        self, singular: str | None = None, *, plural: str | None = None
    ) -> Callable[[ModelT], ModelT]:
        """Class decorator form of :meth:`register_model`."""

        def decorator(model: ModelT) -> ModelT:
            self.register_model(model, singular=singular, plural=plural)
            return model

        return decorator

    def get_fields(self, instance: Any) -> dict[str, Any]:
        """Return column values and loaded relationships of a mapped instance.

        Columns of persistent instances are read with ``getattr``, which
        refreshes expired attributes. Relationships are only returned when
        already loaded, so reading fields never lazy-loads a relationship.
        """
        state = inspect(instance, raiseerr=False)
        if state is None or not hasattr(state, "mapper"):
            return super().get_fields(instance)
        fields: dict[str, Any] = {}
        for attr in state.mapper.column_attrs:
            if attr.key in state.dict:
                fields[attr.key] = state.dict[attr.key]
            elif state.has_identity:
                fields[attr.key] = getattr(instance, attr.key)
        for relationship in state.mapper.relationships:
            loaded = state.attrs[relationship.key].loaded_value
            if loaded is not NO_VALUE:
                fields[relationship.key] = loaded
        return fields

    def _resolve(self, model: type) -> ModelSchema | None:
        schema = super()._resolve(model)
        if schema is None and model in self._models:
            schema = self._schema_from_mapper(model)
            self._schemas[model] = schema
        return schema

    def _singular_for(self, model: type) -> str:
        for klass in model.__mro__:
            if klass in self._models:
                return self._models[klass][0]
            if klass in self._schemas:
                return self._schemas[klass].singular
        return model.__name__.lower()

    def _schema_from_mapper(self, model: type) -> ModelSchema:
        singular, plural = self._models[model]
        mapper = inspect(model)
        properties: dict[str, PropertySchema] = {}
        for attr in mapper.column_attrs:
            column: Any = attr.columns[0]
            properties[attr.key] = PropertySchema(
                type=getattr(column, "type", None),
                public=column.info.get("public") if hasattr(column, "info") else None,
            )
        relationships = {
            relationship.key: RelationshipSchema(
                type=self._singular_for(relationship.mapper.class_),
                has_many=bool(relationship.uselist),
            )
            for relationship in mapper.relationships
        }
        log.debug("Derived schema for %s from its mapper", model.__qualname__)
        return ModelSchema(
            singular=singular,
            plural=plural,
            properties=properties,
            relationships=relationships,
        )
