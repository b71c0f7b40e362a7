"""
API routes: thin HTTP layer over the chat pipeline and the exporters.

Routes:
  GET  /health                                 → liveness
  GET  /api/health                             → Gemini connectivity (connected | fallback)
  POST /api/chat                               → one conversational turn
  POST /api/requirements/merge                 → fold new requirements into a list
  POST /api/export                             → downloadable session JSON
  POST /api/integrations/jira/test             → check Jira credentials
  POST /api/integrations/jira/create-issue     → push one requirement to Jira
  POST /api/integrations/trello/test           → check Trello credentials
  POST /api/integrations/trello/create-card    → push one requirement to Trello
"""

from __future__ import annotations

import logging
import random
from contextlib import closing
from datetime import datetime, timezone
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from requirement_elicitation.config import Settings, get_settings
from requirement_elicitation.models.schemas import (
    ConnectionTestResult,
    ConversationTurn,
    ExportResult,
    ExtractedRequirement,
    HealthStatus,
    JiraConfig,
    TrelloConfig,
    TurnResult,
)
from requirement_elicitation.orchestration.aggregation import merge_requirements
from requirement_elicitation.orchestration.turn_orchestrator import (
    TurnOrchestrator,
    build_orchestrator,
)
from requirement_elicitation.services.export_service import (
    JiraExporter,
    TrelloExporter,
    build_session_export,
    export_filename,
)
from requirement_elicitation.services.health_service import check_health
from requirement_elicitation.utils.ids import RequirementIdFactory

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
chat_router = APIRouter()
integrations_router = APIRouter()


# ── Request schemas ──────────────────────────────────────
class ChatRequest(BaseModel):
    message: str = ""
    conversation_history: list[ConversationTurn] = Field(
        default_factory=list, alias="conversationHistory"
    )

    model_config = {"populate_by_name": True}


class MergeRequest(BaseModel):
    existing: list[ExtractedRequirement] = Field(default_factory=list)
    incoming: list[ExtractedRequirement] = Field(default_factory=list)


class ExportRequest(BaseModel):
    requirements: list[ExtractedRequirement] = Field(default_factory=list)
    conversation: list[ConversationTurn] = Field(default_factory=list)


class JiraIssueRequest(BaseModel):
    requirement: ExtractedRequirement
    jira_config: JiraConfig = Field(alias="jiraConfig")

    model_config = {"populate_by_name": True}


class TrelloCardRequest(BaseModel):
    requirement: ExtractedRequirement
    trello_config: TrelloConfig = Field(alias="trelloConfig")

    model_config = {"populate_by_name": True}


# ── Dependencies ─────────────────────────────────────────

@lru_cache()
def get_id_factory() -> RequirementIdFactory:
    """Process-wide id source; clients hold their requirement lists across requests."""
    return RequirementIdFactory()


@lru_cache()
def get_orchestrator() -> TurnOrchestrator:
    settings = get_settings()
    rng = random.Random(settings.random_seed)
    return build_orchestrator(settings.generation_config(), get_id_factory(), rng)


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
def liveness():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@health_router.get("/api/health", response_model=HealthStatus)
def api_health(settings: Settings = Depends(get_settings)):
    return check_health(settings.generation_config())


# ── Chat ─────────────────────────────────────────────────

@chat_router.post("/chat", response_model=TurnResult)
def chat(request: ChatRequest, orchestrator: TurnOrchestrator = Depends(get_orchestrator)):
    message = request.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    logger.info(f"[API] Chat turn | {len(message)} chars | history={len(request.conversation_history)}")
    return orchestrator.handle_turn(message, request.conversation_history)


@chat_router.post("/requirements/merge", response_model=list[ExtractedRequirement])
def merge(request: MergeRequest):
    return merge_requirements(request.existing, request.incoming)


@chat_router.post("/export")
def export_session(request: ExportRequest):
    now = datetime.now(timezone.utc)
    document = build_session_export(request.requirements, request.conversation, now=now)
    return JSONResponse(
        content=document.model_dump(mode="json"),
        headers={"Content-Disposition": f"attachment; filename={export_filename(now)}"},
    )


# ── Integrations ─────────────────────────────────────────

def _respond(result: ExportResult | ConnectionTestResult) -> JSONResponse:
    return JSONResponse(content=result.model_dump(), status_code=200 if result.success else 400)


@integrations_router.post("/jira/test", response_model=ConnectionTestResult)
def jira_test(config: JiraConfig, settings: Settings = Depends(get_settings)):
    with closing(JiraExporter(config, timeout=settings.integration_timeout_seconds)) as exporter:
        return _respond(exporter.test_connection())


@integrations_router.post("/jira/create-issue", response_model=ExportResult)
def jira_create_issue(request: JiraIssueRequest, settings: Settings = Depends(get_settings)):
    with closing(JiraExporter(request.jira_config, timeout=settings.integration_timeout_seconds)) as exporter:
        return _respond(exporter.create_issue(request.requirement))


@integrations_router.post("/trello/test", response_model=ConnectionTestResult)
def trello_test(config: TrelloConfig, settings: Settings = Depends(get_settings)):
    exporter = TrelloExporter(config, settings.trello_api_key, timeout=settings.integration_timeout_seconds)
    with closing(exporter):
        return _respond(exporter.test_connection())


@integrations_router.post("/trello/create-card", response_model=ExportResult)
def trello_create_card(request: TrelloCardRequest, settings: Settings = Depends(get_settings)):
    exporter = TrelloExporter(
        request.trello_config, settings.trello_api_key, timeout=settings.integration_timeout_seconds
    )
    with closing(exporter):
        return _respond(exporter.create_card(request.requirement))
