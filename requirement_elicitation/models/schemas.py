"""
Data shapes exchanged between the chat pipeline and its callers.

Turns and requirements are frozen once created; the session holder grows
its lists by appending new objects, never by editing old ones.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from .enums import (
    Sender,
    TurnType,
    TurnStatus,
    RequirementType,
    Priority,
    RequirementCategory,
    ApiStatus,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Conversation ─────────────────────────────────────────


class ConversationTurn(BaseModel):
    """One message in the conversation, from the user or the assistant."""
    id: str
    content: str
    sender: Sender
    timestamp: datetime = Field(default_factory=_utcnow)
    type: Optional[TurnType] = None

    model_config = {"frozen": True}


# ── Requirements ─────────────────────────────────────────


class ExtractedRequirement(BaseModel):
    """A single requirement lifted out of a user utterance."""
    id: str
    title: str
    description: str
    type: RequirementType
    priority: Priority = Priority.MEDIUM
    category: RequirementCategory = RequirementCategory.GENERAL
    acceptance_criteria: tuple[str, ...]
    estimated_effort: str = "TBD"
    dependencies: tuple[str, ...] = ()
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}


# ── Turn result ──────────────────────────────────────────


class TurnResult(BaseModel):
    response: str
    type: TurnType = TurnType.GENERAL
    requirements: list[ExtractedRequirement] = []
    status: TurnStatus = TurnStatus.SUCCESS


# ── Health ───────────────────────────────────────────────


class HealthStatus(BaseModel):
    status: ApiStatus
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)


# ── Export targets ───────────────────────────────────────


class JiraConfig(BaseModel):
    url: str
    token: str
    project_key: str = Field(default="", alias="projectKey")

    model_config = {"populate_by_name": True}


class TrelloConfig(BaseModel):
    token: str
    list_id: str = Field(default="", alias="listId")

    model_config = {"populate_by_name": True}


class ExportResult(BaseModel):
    """Outcome of pushing one requirement to a tracker."""
    success: bool
    reference: str = ""  # issue key or card id
    url: str = ""
    message: str = ""


class ConnectionTestResult(BaseModel):
    success: bool
    user: str = ""
    message: str = ""


class SessionExport(BaseModel):
    requirements: list[ExtractedRequirement] = []
    conversation: list[ConversationTurn] = []
    export_date: datetime = Field(default_factory=_utcnow)
