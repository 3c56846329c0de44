"""Serializer configuration and package logging."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

log = logging.getLogger("jsonapi_serializer")
log.addHandler(logging.NullHandler())


class SerializerOptions(BaseModel):
    """Options recognized by the document builder.

    :param stringify: return JSON text instead of a dict
    :param require_id: a single (non-list) instance must carry an ``id``
    :param base_url: prefix for relationship links, e.g. ``https://api.example.com/v1``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    stringify: bool = True
    require_id: bool = True
    base_url: str = ""

    def merge(self, **overrides: Any) -> "SerializerOptions":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return self.model_validate({**self.model_dump(), **changes})


def coerce_options(options: SerializerOptions | Mapping[str, Any] | None) -> SerializerOptions:
    """Validate options given as a mapping, pass instances through."""
    if options is None:
        return SerializerOptions()
    if isinstance(options, SerializerOptions):
        return options
    return SerializerOptions.model_validate(dict(options))
