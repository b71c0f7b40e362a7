"""Builders shared across test modules."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.models.enums import RequirementType
from requirement_elicitation.models.schemas import ExtractedRequirement
from requirement_elicitation.rules.taxonomy import DEFAULT_TAXONOMY
from requirement_elicitation.services.llm_service import GeminiClient


def gemini_reply(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def gemini_client(config: GenerationConfig, handler) -> GeminiClient:
    return GeminiClient(config, http_client=mock_client(handler))


def request_json(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content.decode("utf-8"))


def make_requirement(req_id: str, **overrides: Any) -> ExtractedRequirement:
    fields: dict[str, Any] = {
        "id": req_id,
        "title": "Users can login",
        "description": "Users can login",
        "type": RequirementType.FUNCTIONAL,
        "acceptance_criteria": DEFAULT_TAXONOMY.acceptance_criteria[RequirementType.FUNCTIONAL],
    }
    fields.update(overrides)
    return ExtractedRequirement(**fields)
