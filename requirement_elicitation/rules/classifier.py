"""Response Classifier: labels a generated reply for the chat transcript."""

from __future__ import annotations

from typing import Sequence

from requirement_elicitation.models.enums import TurnType
from requirement_elicitation.models.schemas import ExtractedRequirement

_CLARIFICATION_CUES = ("clarify", "could you")


def classify_response(
    reply: str,
    requirements: Sequence[ExtractedRequirement],
) -> TurnType:
    """
    requirement   → at least one requirement was extracted
    clarification → the reply asks something back
    general       → anything else
    """
    if requirements:
        return TurnType.REQUIREMENT
    lower = reply.lower()
    if "?" in reply or any(cue in lower for cue in _CLARIFICATION_CUES):
        return TurnType.CLARIFICATION
    return TurnType.GENERAL
