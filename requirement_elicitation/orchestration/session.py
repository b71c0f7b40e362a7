"""
Chat session: the caller-side owner of the conversation and the
accumulated requirement list. Nothing here is persisted.
"""

from __future__ import annotations

import itertools
import logging

from requirement_elicitation.models.enums import Sender
from requirement_elicitation.models.schemas import (
    ConversationTurn,
    ExtractedRequirement,
    SessionExport,
    TurnResult,
)
from requirement_elicitation.orchestration.aggregation import merge_requirements
from requirement_elicitation.orchestration.turn_orchestrator import TurnOrchestrator
from requirement_elicitation.services.export_service import build_session_export

logger = logging.getLogger(__name__)


class ChatSession:
    def __init__(self, orchestrator: TurnOrchestrator):
        self.orchestrator = orchestrator
        self.turns: list[ConversationTurn] = []
        self.requirements: list[ExtractedRequirement] = []
        self._turn_ids = itertools.count(1)

    def send(self, text: str) -> TurnResult:
        message = text.strip()
        if not message:
            raise ValueError("Message is required")

        # History handed to the orchestrator excludes the message being answered
        history = tuple(self.turns)
        self.turns.append(
            ConversationTurn(id=self._next_turn_id(), content=message, sender=Sender.USER)
        )

        result = self.orchestrator.handle_turn(message, history)

        self.turns.append(
            ConversationTurn(
                id=self._next_turn_id(),
                content=result.response,
                sender=Sender.BOT,
                type=result.type,
            )
        )
        before = len(self.requirements)
        self.requirements = merge_requirements(self.requirements, result.requirements)
        logger.debug(
            f"[SESSION] {len(self.turns)} turns | requirements {before} → {len(self.requirements)}"
        )
        return result

    def export(self) -> SessionExport:
        return build_session_export(self.requirements, self.turns)

    def _next_turn_id(self) -> str:
        return f"turn_{next(self._turn_ids)}"
