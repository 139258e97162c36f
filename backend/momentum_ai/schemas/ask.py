from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from momentum_ai.errors import ValidationError

MAX_MESSAGE_LENGTH = 2000

EMPTY_MESSAGE = "Message cannot be empty"
TOO_LONG_MESSAGE = "Message too long"


def message_problems(message: str) -> list[str]:
    problems: list[str] = []
    if not message.strip():
        problems.append(EMPTY_MESSAGE)
    if len(message) > MAX_MESSAGE_LENGTH:
        problems.append(TOO_LONG_MESSAGE)
    return problems


class AskRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: StrictStr

    @field_validator("message")
    @classmethod
    def _check_message(cls, value: str) -> str:
        problems = message_problems(value)
        if problems:
            raise PydanticCustomError("message_invalid", problems[0])
        return value


class AskData(BaseModel):
    message: str


class AskResponse(BaseModel):
    success: bool
    message: str | None = None
    data: AskData | None = None
    errors: list[dict[str, Any]] | None = None


def validate_ask_request(payload: Any) -> AskRequest:
    """Validate a raw JSON body into an AskRequest.

    Every problem with the ``message`` field is reported, so a 2001-character
    whitespace string yields both the empty and the too-long error.
    """
    if not isinstance(payload, dict):
        raise ValidationError([{"field": "body", "message": "Expected a JSON object"}])
    if "message" not in payload:
        raise ValidationError([{"field": "message", "message": "Required"}])
    message = payload["message"]
    if not isinstance(message, str):
        raise ValidationError([{"field": "message", "message": "Expected string"}])
    problems = message_problems(message)
    if problems:
        raise ValidationError([{"field": "message", "message": problem} for problem in problems])
    return AskRequest(message=message)
