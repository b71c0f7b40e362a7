"""
Generation strategy interface.

Every strategy answers `generate(message, history) -> TurnResult`. A
strategy that cannot reach its backend raises ServiceUnavailableError so
the orchestrator can move on to the next one in its chain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from requirement_elicitation.models.schemas import ConversationTurn, TurnResult


class GenerationStrategy(ABC):
    """Abstract base for reply generators."""

    name: str  # set in each subclass

    @abstractmethod
    def generate(self, message: str, history: Sequence[ConversationTurn]) -> TurnResult:
        ...
