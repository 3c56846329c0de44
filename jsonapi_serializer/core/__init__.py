"""Core JSON:API document and error helpers."""

from .document import JSONAPIDocumentBuilder, deduplicate_resources, to_json
from .errors import JSONAPIErrorBuilder, errors_to_json
from .exceptions import JSONAPIError, MissingIdentifierError, UnregisteredModelError
from .registry import SchemaRegistry

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "MissingIdentifierError",
    "SchemaRegistry",
    "UnregisteredModelError",
    "deduplicate_resources",
    "errors_to_json",
    "to_json",
]
