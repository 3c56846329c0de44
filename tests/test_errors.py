import json

from jsonapi_serializer import JSONAPIErrorBuilder, MissingIdentifierError, errors_to_json
from jsonapi_serializer.core.exceptions import JSONAPIError
from jsonapi_serializer.schemas import JSONAPIErrorDocument


class StatusError(Exception):
    def __init__(self, message, status):
        super().__init__(message)
        self.message = message
        self.status = status


def test_errors_to_json_returns_json_text():
    serialized = errors_to_json(Exception("test"))
    assert json.loads(serialized) == {"errors": [{"detail": "test"}]}


def test_errors_to_json_returns_dict_when_not_stringified():
    assert errors_to_json(Exception("test"), False) == {"errors": [{"detail": "test"}]}


def test_errors_to_json_serializes_list():
    serialized = errors_to_json([Exception("test1"), Exception("test2")])
    assert json.loads(serialized)["errors"] == [{"detail": "test1"}, {"detail": "test2"}]


def test_status_is_carried_over():
    document = errors_to_json(StatusError("not found", "404"), stringify=False)
    assert document == {"errors": [{"detail": "not found", "status": "404"}]}


def test_error_like_mappings_and_objects_qualify():
    class ErrorLike:
        message = "plain object"

    document = errors_to_json([{"message": "mapping", "status": 422}, ErrorLike()], stringify=False)
    assert document["errors"] == [{"detail": "mapping", "status": 422}, {"detail": "plain object"}]


def test_value_without_message_gives_empty_error_object():
    assert errors_to_json(object(), stringify=False) == {"errors": [{}]}
    assert errors_to_json(Exception(), stringify=False) == {"errors": [{}]}


def test_library_errors_are_error_like():
    document = errors_to_json(
        [MissingIdentifierError(), JSONAPIError("conflict", status="409")], stringify=False
    )
    assert document["errors"] == [
        {"detail": 'Expected an "id" property.'},
        {"detail": "conflict", "status": "409"},
    ]


def test_error_builder_document_matches_schema():
    builder = JSONAPIErrorBuilder()
    document = builder.error_document([builder.error_object(detail="boom", status="500")])
    parsed = JSONAPIErrorDocument.model_validate(document)
    assert parsed.errors[0].detail == "boom"
