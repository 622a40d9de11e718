import json
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from config import GEMINI_API_KEY, GEMINI_API_URL, PLACEHOLDER_API_KEY

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-goog-api-key"


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: list[Part]


class GeminiRequest(BaseModel):
    contents: list[Content]

    @classmethod
    def from_text(cls, text: str) -> "GeminiRequest":
        return cls(contents=[Content(parts=[Part(text=text)])])


class MalformedResponseError(ValueError):
    """Raised when a response body does not carry candidates[0].content.parts[0].text."""


def _step(node: Any, key: str | int, path: str) -> Any:
    try:
        return node[key]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError(f"Missing '{path}' in Gemini response") from exc


def extract_text(body: str) -> str:
    """Return the first candidate's first part text from a generateContent body."""
    try:
        root = json.loads(body)
    except (TypeError, ValueError, RecursionError) as exc:
        raise MalformedResponseError(f"Gemini response is not valid JSON: {exc}") from exc

    if not isinstance(root, dict):
        raise MalformedResponseError("Gemini response is not a JSON object")

    candidates = _step(root, "candidates", "candidates")
    candidate = _step(candidates, 0, "candidates[0]")
    content = _step(candidate, "content", "candidates[0].content")
    parts = _step(content, "parts", "candidates[0].content.parts")
    part = _step(parts, 0, "candidates[0].content.parts[0]")
    text = _step(part, "text", "candidates[0].content.parts[0].text")
    if not isinstance(text, str):
        raise MalformedResponseError("'candidates[0].content.parts[0].text' is not a string")
    return text


class ResultKind(str, Enum):
    OK = "ok"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class GeminiResult:
    kind: ResultKind
    text: str = ""
    error: str = ""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    def as_text(self) -> str:
        if self.ok:
            return self.text
        return f"Error: Could not get response from Gemini API. {self.error}"


def is_key_configured(api_key: str | None) -> bool:
    key = (api_key or "").strip()
    return bool(key) and key != PLACEHOLDER_API_KEY


class GeminiClient:
    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        http_client: httpx.Client | None = None,
    ):
        self.api_url = api_url
        self.api_key = (api_key or "").strip()
        self._http = http_client or httpx.Client(timeout=None)

        if not is_key_configured(self.api_key):
            logger.warning(
                "Gemini API key is not configured. Set GEMINI_API_KEY in your environment or .env file. "
                "Calls will likely fail."
            )

    def generate(self, prompt: str) -> GeminiResult:
        payload = GeminiRequest.from_text(prompt).model_dump()

        logger.info("Calling Gemini API at %s prompt_len=%d", self.api_url, len(prompt or ""))
        logger.debug("Prompt preview: %s", (prompt or "")[:1000])

        try:
            # lone surrogates survive JSON decoding upstream but cannot go on the wire
            prompt.encode("utf-8")
            resp = self._http.post(
                self.api_url,
                json=payload,
                headers={"Content-Type": "application/json", API_KEY_HEADER: self.api_key},
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            logger.error("Error calling Gemini API: %s", exc)
            return GeminiResult(kind=ResultKind.TRANSPORT, error=str(exc) or exc.__class__.__name__)

        logger.info("Gemini API returned status=%d", resp.status_code)

        if resp.status_code >= 400:
            logger.error("Gemini error response: %s", resp.text[:1000])
            return GeminiResult(
                kind=ResultKind.UPSTREAM,
                error=f"HTTP {resp.status_code} - {resp.text[:500]}",
                status_code=resp.status_code,
            )

        logger.debug("Response preview: %s", resp.text[:1000])
        try:
            text = extract_text(resp.text)
        except MalformedResponseError as exc:
            logger.error("Malformed Gemini response: %s", exc)
            return GeminiResult(kind=ResultKind.MALFORMED_RESPONSE, error=str(exc), status_code=resp.status_code)

        logger.info("Gemini response received resp_len=%d", len(text))
        return GeminiResult(kind=ResultKind.OK, text=text, status_code=resp.status_code)

    def call(self, prompt: str) -> str:
        return self.generate(prompt).as_text()

    def close(self) -> None:
        self._http.close()


_client: GeminiClient | None = None
_client_lock = threading.Lock()


def get_client() -> GeminiClient:
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = GeminiClient(GEMINI_API_URL, GEMINI_API_KEY)
    return _client


def close_client() -> None:
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None


def ask_gemini(prompt: str, client: GeminiClient | None = None) -> str:
    return (client or get_client()).call(prompt)
