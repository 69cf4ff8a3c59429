from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from course_assistant.core.errors import GenerationError

log = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response from Gemini"


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.2
    max_output_tokens: int = 10000

    def to_dict(self) -> dict[str, Any]:
        return {"temperature": self.temperature, "maxOutputTokens": self.max_output_tokens}


class TextGenerator(Protocol):
    async def generate(self, prompt: str, config: GenerationConfig) -> str: ...


class GeminiClient:
    """
    Thin wrapper over the Gemini generateContent REST endpoint.
    - sends one prompt as the sole user turn and returns the first text part
    - an unusable payload degrades to NO_RESPONSE_TEXT instead of failing
    - knows nothing about modes, prompts or response formatting
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout_s: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._model = model
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_s))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        url = f"{self._base_url}/v1/models/{self._model}:generateContent"
        req_payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": config.to_dict(),
        }
        try:
            resp = await self._client.post(
                url,
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                json=req_payload,
            )
        except httpx.HTTPError as e:
            log.error("Gemini request failed: %s: %s", type(e).__name__, e)
            raise GenerationError("Error contacting Gemini") from e

        if resp.status_code >= 400:
            log.warning("Gemini returned %s: %s", resp.status_code, resp.text[:500])
        try:
            data = resp.json()
        except ValueError:
            log.warning("Gemini response was not JSON")
            return NO_RESPONSE_TEXT
        return self._extract_text(data) or NO_RESPONSE_TEXT

    def _extract_text(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return None
        first = candidates[0]
        content = first.get("content") if isinstance(first, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not parts:
            return None
        part = parts[0]
        text = part.get("text") if isinstance(part, dict) else None
        if isinstance(text, str) and text.strip():
            return text
        return None
