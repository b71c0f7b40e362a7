from .turn_orchestrator import TurnOrchestrator, build_orchestrator, APOLOGY_MESSAGE
from .aggregation import merge_requirements, categorize
from .session import ChatSession

__all__ = [
    "TurnOrchestrator",
    "build_orchestrator",
    "APOLOGY_MESSAGE",
    "merge_requirements",
    "categorize",
    "ChatSession",
]
