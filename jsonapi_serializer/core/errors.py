"""JSON:API error objects and error documents."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from jsonapi_serializer.utils.encoding import render_json


def _read(error: Any, name: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(name)
    return getattr(error, name, None)


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(self, *, detail: Any = None, status: Any = None) -> dict[str, Any]:
        """Return a JSON:API error object, leaving out unset members."""
        error: dict[str, Any] = {}
        if detail is not None:
            error["detail"] = detail
        if status is not None:
            error["status"] = status
        return error

    def from_error(self, error: Any) -> dict[str, Any]:
        """Return the error object for an error-like value.

        An error-like value is anything with a ``message`` (attribute or
        mapping key) and optionally a ``status``. Exceptions without a
        ``message`` attribute use their string form.
        """
        detail = _read(error, "message")
        if detail is None and isinstance(error, BaseException) and error.args:
            detail = str(error)
        return self.error_object(detail=detail, status=_read(error, "status"))

    def error_document(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": [dict(error) for error in errors]}


def errors_to_json(errors: Any, stringify: bool = True) -> str | dict[str, Any]:
    """Serialize an error-like value or a list of them to a JSON:API error document."""
    if not isinstance(errors, (list, tuple)):
        errors = [errors]
    builder = JSONAPIErrorBuilder()
    document = builder.error_document(builder.from_error(error) for error in errors)
    return render_json(document) if stringify else document
