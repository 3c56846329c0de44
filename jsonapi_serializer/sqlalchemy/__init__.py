"""SQLAlchemy integration."""

from .registry import SQLAlchemySchemaRegistry

__all__ = ["SQLAlchemySchemaRegistry"]
