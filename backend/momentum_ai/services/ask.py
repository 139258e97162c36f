from __future__ import annotations

import logging
from typing import Protocol

from momentum_ai.errors import UpstreamError
from momentum_ai.schemas.ask import AskRequest
from momentum_ai.services.access import Principal
from momentum_ai.services.gemini_client import GenerationFailure, GenerationResult
from momentum_ai.services.prompt import GenerationPayload, compose
from momentum_ai.services.sanitizer import sanitize

logger = logging.getLogger(__name__)

UPSTREAM_FAILED = "Failed to get response from AI"


class Generator(Protocol):
    async def generate(self, payload: GenerationPayload) -> GenerationResult: ...


async def answer_question(request: AskRequest, principal: Principal, generator: Generator) -> str:
    logger.info("Ask AI request from user %s (%d chars)", principal.id, len(request.message))
    result = await generator.generate(compose(request.message))
    if isinstance(result, GenerationFailure):
        raise UpstreamError(UPSTREAM_FAILED)
    return sanitize(result.raw_text)
