"""ASGI middleware for JSON:API services."""

from .error_handler import JSONAPI_MEDIA_TYPE, ErrorHandlerMiddleware

__all__ = ["JSONAPI_MEDIA_TYPE", "ErrorHandlerMiddleware"]
