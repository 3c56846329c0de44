"""JSON:API top-level document construction."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from jsonapi_serializer.config import SerializerOptions, coerce_options
from jsonapi_serializer.core.registry import SchemaRegistry
from jsonapi_serializer.serializers.base import JSONAPISerializer
from jsonapi_serializer.utils.encoding import render_json

log = logging.getLogger(__name__)


def deduplicate_resources(resources: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Drop resources whose (type, id) was already seen; first occurrence wins."""
    seen: set[tuple[Any, Any]] = set()
    unique: list[dict[str, Any]] = []
    for resource in resources:
        key = (resource.get("type"), resource.get("id"))
        if key in seen:
            continue
        seen.add(key)
        unique.append(dict(resource))
    return unique


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from model instances."""

    serializer_class: type[JSONAPISerializer] = JSONAPISerializer

    def __init__(
        self,
        registry: SchemaRegistry,
        options: SerializerOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self.registry = registry
        self.options = coerce_options(options)

    def get_serializer(self, options: SerializerOptions) -> JSONAPISerializer:
        """Instantiate the serializer."""
        return self.serializer_class(self.registry, base_url=options.base_url)

    def build_single(
        self,
        resource: Mapping[str, Any],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        document: dict[str, Any] = {"data": dict(resource)}
        included = deduplicate_resources(included or ())
        if included:
            document["included"] = included
        return document

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources."""
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        included = deduplicate_resources(included or ())
        if included:
            document["included"] = included
        return document

    def build_document(self, instance: Any, **overrides: Any) -> dict[str, Any] | None:
        """Return the document for an instance or a list of instances as a dict."""
        options = self.options.merge(**overrides)
        if instance is None:
            return None
        serializer = self.get_serializer(options)

        if isinstance(instance, (list, tuple)):
            # Elements always require an id, regardless of require_id.
            resources = serializer.to_many(instance)
            included = [
                resource
                for item in instance
                for resource in serializer.collect_included(item)
            ]
            document = self.build_collection(resources, included=included)
        else:
            resource = serializer.to_resource(instance, require_id=options.require_id)
            document = self.build_single(resource, included=serializer.collect_included(instance))

        log.debug("Built document with %d included resources", len(document.get("included", ())))
        return document

    def to_json(
        self,
        instance: Any = None,
        *,
        stringify: bool | None = None,
        require_id: bool | None = None,
        base_url: str | None = None,
    ) -> str | dict[str, Any] | None:
        """Serialize an instance or a list of instances.

        Returns JSON text unless ``stringify`` is false, in which case the
        document dict (or None for a missing instance) is returned.
        """
        options = self.options.merge(stringify=stringify, require_id=require_id, base_url=base_url)
        document = self.build_document(instance, require_id=options.require_id, base_url=options.base_url)
        return render_json(document) if options.stringify else document


def to_json(
    instance: Any = None,
    registry: SchemaRegistry | None = None,
    *,
    stringify: bool = True,
    require_id: bool = True,
    base_url: str = "",
) -> str | dict[str, Any] | None:
    """Serialize registered model instance(s) to a JSON:API document.

    :param instance: a model instance, a list of instances, or None
    :param registry: schema registry the instance classes are registered in
    :param stringify: return JSON text, otherwise a dict (or None)
    :param require_id: fail when a single instance has no ``id`` property;
        elements of a list always require one
    :param base_url: prefix for relationship links
    """
    if instance is None:
        return render_json(None) if stringify else None
    if registry is None:
        raise TypeError("A schema registry is required to serialize instances.")
    builder = JSONAPIDocumentBuilder(
        registry,
        SerializerOptions(stringify=stringify, require_id=require_id, base_url=base_url),
    )
    return builder.to_json(instance)
