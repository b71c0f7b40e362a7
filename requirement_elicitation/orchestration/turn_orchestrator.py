"""
Turn Orchestrator: runs one user message through an ordered chain of
generation strategies and always hands back a well-formed TurnResult.

Chain semantics:
  - a strategy that returns a result ends the turn (even status=error)
  - ServiceUnavailableError or an unexpected exception → try the next one
  - chain exhausted → fixed apology with status=error
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.models.enums import TurnStatus, TurnType
from requirement_elicitation.models.schemas import ConversationTurn, TurnResult
from requirement_elicitation.rules.extractor import RequirementExtractor
from requirement_elicitation.services.errors import ServiceUnavailableError
from requirement_elicitation.services.generation import (
    GenerationStrategy,
    LocalGenerationService,
    RemoteGenerationService,
)
from requirement_elicitation.utils.ids import RequirementIdFactory

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = (
    "I apologize, but I'm having trouble processing your request right now. "
    "Could you please rephrase your requirement or provide more specific details?"
)


class TurnOrchestrator:
    """Tries each strategy in order until one produces a reply."""

    def __init__(self, strategies: Sequence[GenerationStrategy]):
        self.strategies = list(strategies)

    def handle_turn(self, message: str, history: Sequence[ConversationTurn] = ()) -> TurnResult:
        for strategy in self.strategies:
            try:
                result = strategy.generate(message, history)
            except ServiceUnavailableError as exc:
                logger.warning(f"[TURN] {strategy.name} unavailable ({exc}); falling back")
                continue
            except Exception as exc:
                logger.exception(f"[TURN] {strategy.name} failed unexpectedly: {exc}")
                continue
            logger.info(
                f"[TURN] Answered by {strategy.name} | status={result.status.value} | "
                f"type={result.type.value}"
            )
            return result

        logger.error("[TURN] Every generation strategy failed: returning apology")
        return TurnResult(
            response=APOLOGY_MESSAGE,
            type=TurnType.GENERAL,
            requirements=[],
            status=TurnStatus.ERROR,
        )


def build_orchestrator(
    config: GenerationConfig,
    id_factory: RequirementIdFactory | None = None,
    rng: random.Random | None = None,
) -> TurnOrchestrator:
    """
    Remote first when a credential is configured, Local always last.
    The credential check happens here, once, not on every turn.
    """
    extractor = RequirementExtractor(id_factory=id_factory)
    strategies: list[GenerationStrategy] = []
    if config.has_credential:
        strategies.append(RemoteGenerationService(config, extractor))
    else:
        logger.info("[TURN] No Gemini API key: running on local rules only")
    strategies.append(LocalGenerationService(extractor, rng=rng))
    return TurnOrchestrator(strategies)
