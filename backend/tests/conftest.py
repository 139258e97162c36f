from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from momentum_ai.auth import create_access_token
from momentum_ai.config import Settings, get_settings
from momentum_ai.main import create_app
from momentum_ai.routes.ai import get_generation_client
from momentum_ai.services.access import Principal, Role
from momentum_ai.services.gemini_client import GeminiClient

JWT_SECRET = "test-secret-with-at-least-32-bytes!!"


def gemini_reply(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@dataclass
class FakeGemini:
    """Stands in for the generateContent endpoint and records every call."""

    status_code: int = 200
    body: Any = field(default_factory=lambda: gemini_reply("Validate the idea before you build it."))
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "gemini_api_key": "test-key",
        "jwt_secret": JWT_SECRET,
        "log_level": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def token_for(role: Role, user_id: str = "user-1") -> str:
    return create_access_token(Principal(id=user_id, role=role), JWT_SECRET)


def auth_header(role: Role = Role.VIEWER) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_for(role)}"}


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings, fake_gemini: FakeGemini):
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings

    def _client(current: Settings = Depends(get_settings)) -> GeminiClient:
        client = GeminiClient.from_settings(current)
        client._transport = fake_gemini.transport
        return client

    application.dependency_overrides[get_generation_client] = _client
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
