import pytest

from momentum_ai.errors import UpstreamError
from momentum_ai.schemas.ask import AskRequest
from momentum_ai.services.access import Principal, Role
from momentum_ai.services.ask import UPSTREAM_FAILED, answer_question
from momentum_ai.services.gemini_client import GenerationFailure, GenerationSuccess

VIEWER = Principal(id="v1", role=Role.VIEWER)


class StubGenerator:
    def __init__(self, result):
        self.result = result
        self.payloads = []

    async def generate(self, payload):
        self.payloads.append(payload)
        return self.result


async def test_success_is_sanitized():
    generator = StubGenerator(GenerationSuccess(raw_text="  **Bold** move\n* step one  "))
    answer = await answer_question(AskRequest(message="Hi"), VIEWER, generator)

    assert answer == "Bold move\n• step one"
    assert generator.payloads[0].user_text == "Hi"


async def test_failure_becomes_generic_upstream_error():
    generator = StubGenerator(GenerationFailure(kind="http_500", detail="internal upstream trace"))
    with pytest.raises(UpstreamError) as excinfo:
        await answer_question(AskRequest(message="Hi"), VIEWER, generator)

    assert excinfo.value.message == UPSTREAM_FAILED
    assert "internal upstream trace" not in str(excinfo.value)
    assert excinfo.value.status_code == 500
