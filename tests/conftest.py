import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app import app
from gemini_client import GeminiClient, get_client
from user_store import create_schema, get_engine, make_engine

API_URL = "https://gemini.test/v1beta/models/test-model:generateContent"


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}]}


class FakeGemini:
    """Records outbound requests and answers with a configurable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json=gemini_body("hello"))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def sent_prompts(self) -> list[str]:
        return [json.loads(r.content)["contents"][0]["parts"][0]["text"] for r in self.requests]


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def gemini_client(fake_gemini: FakeGemini) -> GeminiClient:
    http = httpx.Client(transport=httpx.MockTransport(fake_gemini))
    client = GeminiClient(API_URL, "test-key", http_client=http)
    yield client
    client.close()


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def client(gemini_client: GeminiClient, engine) -> TestClient:
    app.dependency_overrides[get_client] = lambda: gemini_client
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
