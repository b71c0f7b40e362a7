"""Services: GeminiClient, generation strategies, health check, exporters."""

from requirement_elicitation.services.llm_service import GeminiClient
from requirement_elicitation.services.health_service import check_health
from requirement_elicitation.services.export_service import (
    JiraExporter,
    TrelloExporter,
    build_session_export,
    export_filename,
    generate_user_story,
)

__all__ = [
    "GeminiClient",
    "check_health",
    "JiraExporter",
    "TrelloExporter",
    "build_session_export",
    "export_filename",
    "generate_user_story",
]
