from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from momentum_ai.config import Settings
from momentum_ai.errors import ConfigurationError
from momentum_ai.services.prompt import GenerationPayload

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "AI service is not configured"
EMPTY_RESPONSE_TEXT = "No response generated"


@dataclass(frozen=True)
class GenerationSuccess:
    raw_text: str


@dataclass(frozen=True)
class GenerationFailure:
    kind: str
    detail: Any = None


GenerationResult = GenerationSuccess | GenerationFailure


def _extract_text(data: Any) -> str | None:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


def _error_detail(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class GeminiClient:
    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        model: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiClient:
        return cls(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
            timeout=settings.gemini_timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, payload: GenerationPayload) -> GenerationResult:
        if not self.api_key:
            raise ConfigurationError(NOT_CONFIGURED)

        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self.endpoint, json=payload.to_request_body(), headers=headers)
            except httpx.HTTPError as exc:
                logger.error("Gemini request failed: %r", exc)
                return GenerationFailure(kind="transport", detail=repr(exc))

        if not resp.is_success:
            detail = _error_detail(resp)
            logger.error("Gemini API error (status %s): %s", resp.status_code, detail)
            return GenerationFailure(kind=f"http_{resp.status_code}", detail=detail)

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body")
            data = None
        text = _extract_text(data)
        if text is None:
            logger.warning("Gemini returned no candidate text")
            return GenerationSuccess(raw_text=EMPTY_RESPONSE_TEXT)
        return GenerationSuccess(raw_text=text)
