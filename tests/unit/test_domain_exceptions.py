"""Tests for domain exceptions (error_code, message, details)."""

from taskboard.domain.exceptions import (
    InvalidFieldsException,
    InvalidSortKeyException,
    MalformedPayloadException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskAlreadyExistsException,
    TaskboardException,
    UnsupportedFormatException,
    ValidationException,
)


def test_taskboard_exception_default_error_code() -> None:
    """Base TaskboardException uses class name as error_code when not provided."""
    exc = TaskboardException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskboardException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = TaskboardException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid status", field="status")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "status"}
    assert ValidationException("Invalid").details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("task", "t9")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert "t9" in exc.message


def test_task_already_exists() -> None:
    exc = TaskAlreadyExistsException("t1")
    assert exc.error_code == "TASK_ALREADY_EXISTS"
    assert exc.details == {"task_id": "t1"}


def test_invalid_sort_key_and_fields() -> None:
    sort_exc = InvalidSortKeyException("-owner", ["id", "title"])
    assert sort_exc.error_code == "INVALID_SORT_KEY"
    assert sort_exc.details == {"sort_key": "-owner", "allowed": ["id", "title"]}
    fields_exc = InvalidFieldsException(["owner"], ["id", "title"])
    assert fields_exc.error_code == "INVALID_FIELDS"
    assert fields_exc.message == "Unknown fields: owner"


def test_unsupported_format() -> None:
    exc = UnsupportedFormatException("pdf", ["csv", "xml"])
    assert exc.error_code == "UNSUPPORTED_FORMAT"
    assert exc.details["format"] == "pdf"


def test_malformed_payload_details_only_with_errors() -> None:
    assert MalformedPayloadException().details == {}
    exc = MalformedPayloadException(errors=[{"loc": ["title"], "msg": "Field required"}])
    assert exc.error_code == "MALFORMED_PAYLOAD"
    assert exc.details["errors"][0]["loc"] == ["title"]


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
