"""Utilities for rendering JSON:API payloads."""

from .encoding import render_json

__all__ = ["render_json"]
