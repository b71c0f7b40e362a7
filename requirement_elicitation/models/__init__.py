"""Models: enums and pydantic schemas."""

from requirement_elicitation.models.enums import (
    Sender,
    TurnType,
    TurnStatus,
    RequirementType,
    Priority,
    RequirementCategory,
    ApiStatus,
)
from requirement_elicitation.models.schemas import (
    ConversationTurn,
    ExtractedRequirement,
    TurnResult,
    HealthStatus,
    JiraConfig,
    TrelloConfig,
    ExportResult,
    ConnectionTestResult,
    SessionExport,
)

__all__ = [
    "Sender",
    "TurnType",
    "TurnStatus",
    "RequirementType",
    "Priority",
    "RequirementCategory",
    "ApiStatus",
    "ConversationTurn",
    "ExtractedRequirement",
    "TurnResult",
    "HealthStatus",
    "JiraConfig",
    "TrelloConfig",
    "ExportResult",
    "ConnectionTestResult",
    "SessionExport",
]
