"""Serialize model instances and errors into JSON:API v1.1 documents."""

from .config import SerializerOptions
from .core.document import JSONAPIDocumentBuilder, deduplicate_resources, to_json
from .core.errors import JSONAPIErrorBuilder, errors_to_json
from .core.exceptions import JSONAPIError, MissingIdentifierError, UnregisteredModelError
from .core.registry import SchemaRegistry
from .schemas.model import ModelSchema, PropertySchema, RelationshipSchema
from .serializers.base import JSONAPISerializer

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPISerializer",
    "MissingIdentifierError",
    "ModelSchema",
    "PropertySchema",
    "RelationshipSchema",
    "SchemaRegistry",
    "SerializerOptions",
    "UnregisteredModelError",
    "deduplicate_resources",
    "errors_to_json",
    "to_json",
]
