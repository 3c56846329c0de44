"""Pydantic schemas for JSON:API documents and model definitions."""

from .model import ModelSchema, PropertySchema, RelationshipSchema
from .resource import (
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIErrorObject,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIErrorObject",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "ModelSchema",
    "PropertySchema",
    "RelationshipSchema",
]
