"""
LLM Service: thin Gemini `generateContent` client over httpx.

Provides:
  - GeminiClient.post_generate()  → raw JSON reply (dict)
  - GeminiClient.generate_text()  → the first candidate's text

Transport problems surface as ServiceUnavailableError; anything wrong
with a reply that did arrive surfaces as GenerationProtocolError.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.services.errors import (
    GenerationProtocolError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)


class GeminiClient:
    """One-shot text generation against the configured Gemini model."""

    def __init__(self, config: GenerationConfig, http_client: httpx.Client | None = None):
        self.config = config
        self._http = http_client or httpx.Client(timeout=config.timeout_seconds)

    def build_payload(
        self,
        prompt: str,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> dict[str, Any]:
        generation_config: dict[str, Any] = {
            "temperature": self.config.temperature if temperature is None else temperature,
            "maxOutputTokens": (
                self.config.max_output_tokens if max_output_tokens is None else max_output_tokens
            ),
        }
        if temperature is None:
            generation_config["topP"] = self.config.top_p
            generation_config["topK"] = self.config.top_k
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

    def post_generate(self, prompt: str, **params: Any) -> dict[str, Any]:
        """POST the prompt and return the decoded JSON body."""
        payload = self.build_payload(prompt, **params)
        logger.debug(f"[LLM] Prompt length: {len(prompt)} chars | model={self.config.model}")

        t0 = time.perf_counter()
        try:
            response = self._http.post(
                self.config.endpoint,
                params={"key": self.config.api_key},
                json=payload,
                timeout=self.config.timeout_seconds,
            )
        except httpx.DecodingError as exc:
            # Reply arrived but its content encoding is corrupt
            logger.error(f"[LLM] Undecodable response body: {exc!r}")
            raise GenerationProtocolError("Failed to parse Gemini API response.") from exc
        except httpx.RequestError as exc:
            logger.warning(f"[LLM] Transport failure after {time.perf_counter() - t0:.2f}s: {exc!r}")
            raise ServiceUnavailableError(str(exc) or type(exc).__name__) from exc
        elapsed = time.perf_counter() - t0

        logger.info(f"[LLM] Response {response.status_code} in {elapsed:.2f}s")

        if not response.is_success:
            raise GenerationProtocolError(
                f"Gemini API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise GenerationProtocolError("Failed to parse Gemini API response.") from exc

        if not isinstance(data, dict):
            raise GenerationProtocolError("Gemini API returned an unexpected response format.")
        return data

    def generate_text(self, prompt: str, **params: Any) -> str:
        data = self.post_generate(prompt, **params)
        text = extract_candidate_text(data)
        if text is None:
            logger.error(f"[LLM] Unexpected response structure: {data}")
            raise GenerationProtocolError("Gemini API returned an unexpected response format.")
        logger.debug(f"[LLM] Full response:\n{text}")
        return text

    def close(self) -> None:
        self._http.close()


def extract_candidate_text(data: dict[str, Any]) -> str | None:
    """Walk candidates[0].content.parts[0].text, returning None on any gap."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text
