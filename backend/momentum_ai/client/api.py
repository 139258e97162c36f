from __future__ import annotations

import logging

import httpx

from momentum_ai.schemas.ask import AskResponse

logger = logging.getLogger(__name__)

ASK_PATH = "/api/ai/ask"


class AskAPIError(Exception):
    """Raised when the server reply is not an Ask AI envelope."""


class AskAIClient:
    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def ask(self, message: str) -> AskResponse:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            resp = await client.post(ASK_PATH, json={"message": message}, headers=self._headers())
        try:
            return AskResponse.model_validate(resp.json())
        except ValueError as exc:
            logger.warning("Unexpected Ask AI reply (status %s)", resp.status_code)
            raise AskAPIError(f"unexpected reply with status {resp.status_code}") from exc
