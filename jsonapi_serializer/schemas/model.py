"""Pydantic schemas describing serializable models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PropertySchema(BaseModel):
    """A declared property. ``public=False`` keeps it out of attributes."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Any = None
    public: bool | None = None

    @property
    def is_public(self) -> bool:
        return self.public is None or self.public is True


class RelationshipSchema(BaseModel):
    """A declared relationship: the related type's singular name and cardinality."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    has_many: bool = Field(default=False, alias="hasMany")


class ModelSchema(BaseModel):
    """Type names, properties and relationships of one model."""

    model_config = ConfigDict(frozen=True)

    singular: str
    plural: str = ""
    properties: dict[str, PropertySchema] = Field(default_factory=dict)
    relationships: dict[str, RelationshipSchema] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def default_plural(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("plural") and data.get("singular"):
            data = {**data, "plural": f"{data['singular']}s"}
        return data
