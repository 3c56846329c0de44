"""Serializer classes for JSON:API resources."""

from .base import JSONAPISerializer

__all__ = ["JSONAPISerializer"]
