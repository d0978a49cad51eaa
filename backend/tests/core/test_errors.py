"""Error Hierarchy — tests for codes, statuses and REST envelopes."""

from calculator.core.errors import (
    CalculatorError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidKeyError, InvalidPrecisionError, HistoryEntryNotFoundError,
    ResourceNotFoundError, SessionLimitError,
)


def test_all_errors_share_base():
    for err in (
        InvalidKeyError("?"),
        InvalidPrecisionError(9),
        HistoryEntryNotFoundError(3, 1),
        ResourceNotFoundError("Calculator", "abc"),
        SessionLimitError(5),
    ):
        assert isinstance(err, CalculatorError)


def test_http_statuses():
    assert InvalidKeyError("?").http_status == 400
    assert InvalidPrecisionError(9).http_status == 400
    assert HistoryEntryNotFoundError(3, 1).http_status == 404
    assert ResourceNotFoundError("Calculator", "abc").http_status == 404
    assert SessionLimitError(5).http_status == 409


def test_invalid_key_records_key_in_context():
    err = InvalidKeyError("sqrt", ErrorContext(calculator_id="c-1"))
    assert err.context.key == "sqrt"
    assert err.context.calculator_id == "c-1"
    assert err.category is ErrorCategory.VALIDATION


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Calculator", "abc", ErrorContext(calculator_id="abc"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Calculator 'abc' not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["context"] == {"calculator_id": "abc", "key": None}
    assert "timestamp" in body


def test_history_error_message_mentions_size():
    err = HistoryEntryNotFoundError(4, 2)
    assert "#4" in err.message
    assert "2 entries" in err.message
