import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from momentum_ai.errors import ValidationError
from momentum_ai.schemas.ask import (
    EMPTY_MESSAGE,
    MAX_MESSAGE_LENGTH,
    TOO_LONG_MESSAGE,
    AskRequest,
    validate_ask_request,
)


def _messages(exc: ValidationError) -> list[str]:
    return [err["message"] for err in exc.errors]


@settings(max_examples=200)
@given(st.text(min_size=1, max_size=MAX_MESSAGE_LENGTH).filter(lambda s: s.strip()))
def test_valid_messages_pass_unchanged(message):
    assert validate_ask_request({"message": message}).message == message


@given(st.text(alphabet=" \t\n\r ", max_size=50))
def test_blank_messages_are_empty(message):
    with pytest.raises(ValidationError) as excinfo:
        validate_ask_request({"message": message})
    assert EMPTY_MESSAGE in _messages(excinfo.value)


@settings(max_examples=50)
@given(st.text(min_size=1, max_size=20).map(lambda s: s * (MAX_MESSAGE_LENGTH // len(s) + 1)))
def test_long_messages_are_too_long(message):
    with pytest.raises(ValidationError) as excinfo:
        validate_ask_request({"message": message})
    assert TOO_LONG_MESSAGE in _messages(excinfo.value)


def test_blank_and_long_reports_both():
    with pytest.raises(ValidationError) as excinfo:
        validate_ask_request({"message": " " * (MAX_MESSAGE_LENGTH + 1)})
    assert _messages(excinfo.value) == [EMPTY_MESSAGE, TOO_LONG_MESSAGE]


@pytest.mark.parametrize("payload", [None, "hi", [], {}, {"message": 1}, {"message": b"hi"}])
def test_shape_errors(payload):
    with pytest.raises(ValidationError) as excinfo:
        validate_ask_request(payload)
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Invalid request"


def test_model_rejects_blank_message():
    with pytest.raises(ValueError, match=EMPTY_MESSAGE):
        AskRequest(message="   ")


def test_model_is_frozen():
    request = AskRequest(message="hello")
    with pytest.raises(ValueError):
        request.message = "changed"
