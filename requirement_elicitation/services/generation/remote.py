"""
Remote generation: asks Gemini for the conversational reply, then
annotates it with requirements extracted from the user's own message.

Outcomes:
  - reply arrived and parsed       → status=success
  - no credential / bad reply      → status=error, diagnostic in `response`
  - call could not complete        → ServiceUnavailableError (caller falls back)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.models.enums import TurnStatus, TurnType
from requirement_elicitation.models.schemas import ConversationTurn, TurnResult
from requirement_elicitation.rules.classifier import classify_response
from requirement_elicitation.rules.extractor import RequirementExtractor
from requirement_elicitation.services.errors import GenerationProtocolError
from requirement_elicitation.services.generation.base import GenerationStrategy
from requirement_elicitation.services.llm_service import GeminiClient

logger = logging.getLogger(__name__)

_PROMPT_PATH = Path(__file__).resolve().parent.parent.parent / "prompts" / "chat_prompt.txt"


class RemoteGenerationService(GenerationStrategy):
    name = "remote"

    def __init__(
        self,
        config: GenerationConfig,
        extractor: RequirementExtractor,
        client: GeminiClient | None = None,
    ):
        self.config = config
        self.extractor = extractor
        self.client = client or GeminiClient(config)
        self._template = _PROMPT_PATH.read_text(encoding="utf-8")

    def build_prompt(self, message: str, history: Sequence[ConversationTurn]) -> str:
        return self._template.format(
            context=render_context(history, self.config.history_window),
            message=message,
        )

    def generate(self, message: str, history: Sequence[ConversationTurn]) -> TurnResult:
        if not self.config.has_credential:
            logger.warning("[REMOTE] No Gemini API key configured")
            return _error_result("Gemini API key is not configured.")

        prompt = self.build_prompt(message, history)
        try:
            reply = self.client.generate_text(prompt)
        except GenerationProtocolError as exc:
            logger.error(f"[REMOTE] Protocol failure: {exc}")
            return _error_result(str(exc))

        split = self.config.segmentation == "sentence"
        requirements = self.extractor.extract(message, split_sentences=split)
        turn_type = classify_response(reply, requirements)
        logger.info(
            f"[REMOTE] Reply {len(reply)} chars | type={turn_type.value} | "
            f"requirements={len(requirements)}"
        )
        return TurnResult(
            response=reply,
            type=turn_type,
            requirements=requirements,
            status=TurnStatus.SUCCESS,
        )


def render_context(history: Sequence[ConversationTurn], window: int) -> str:
    """Last *window* turns as `sender: content` lines."""
    recent = list(history)[-window:] if window > 0 else []
    return "\n".join(f"{turn.sender.value}: {turn.content}" for turn in recent)


def _error_result(message: str) -> TurnResult:
    return TurnResult(
        response=message,
        type=TurnType.GENERAL,
        requirements=[],
        status=TurnStatus.ERROR,
    )
