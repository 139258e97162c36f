from typing import Any

from fastapi import APIRouter, Body, Depends

from momentum_ai.auth import require_viewer
from momentum_ai.config import Settings, get_settings
from momentum_ai.schemas.ask import AskData, AskResponse, validate_ask_request
from momentum_ai.services.access import Principal
from momentum_ai.services.ask import answer_question
from momentum_ai.services.gemini_client import GeminiClient

router = APIRouter(prefix="/api/ai", tags=["ai"])


def get_generation_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient.from_settings(settings)


@router.post("/ask", response_model=AskResponse, response_model_exclude_none=True)
async def ask(
    payload: Any = Body(default=None),
    principal: Principal = Depends(require_viewer),
    client: GeminiClient = Depends(get_generation_client),
) -> AskResponse:
    request = validate_ask_request(payload)
    answer = await answer_question(request, principal, client)
    return AskResponse(success=True, data=AskData(message=answer))
