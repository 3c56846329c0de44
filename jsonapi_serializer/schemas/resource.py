"""Pydantic schemas for JSON:API v1.1 documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: Optional[str] = None


class JSONAPIRelationshipLinks(BaseModel):
    """Links member of a relationship object."""

    self: str
    related: str


class JSONAPIRelationship(BaseModel):
    """Relationship object with optional links and resource linkage."""

    links: Optional[JSONAPIRelationshipLinks] = None
    data: Optional[Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier]]] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: Optional[str] = None
    attributes: Dict[str, Any]
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Optional[Union[JSONAPIResource, List[JSONAPIResource]]] = None
    included: Optional[List[JSONAPIResource]] = None


class JSONAPIErrorObject(BaseModel):
    """Error object as produced from an error-like value."""

    detail: Optional[str] = None
    status: Optional[Any] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[JSONAPIErrorObject]
