"""Render JSON:API documents as JSON text."""

from __future__ import annotations

from typing import Any

from pydantic_core import to_json


def render_json(document: Any) -> str:
    """Return compact UTF-8 JSON text for a document.

    Datetimes, dates, UUIDs, decimals and enums are rendered the way pydantic
    renders them in JSON mode.
    """
    return to_json(document).decode("utf-8")
