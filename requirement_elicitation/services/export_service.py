"""
Export Service: pushes requirements to work trackers and packages a
session for download.

  - JiraExporter    → one Story per requirement
  - TrelloExporter  → one card per requirement
  - build_session_export() / export_filename() → downloadable JSON

Tracker failures come back as `success=False` results; nothing raises
past these adapters.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Sequence

import httpx

from requirement_elicitation.models.schemas import (
    ConnectionTestResult,
    ConversationTurn,
    ExportResult,
    ExtractedRequirement,
    JiraConfig,
    SessionExport,
    TrelloConfig,
)
from requirement_elicitation.services.errors import ExportError

logger = logging.getLogger(__name__)

TRELLO_API_URL = "https://api.trello.com/1"


# ── Jira ─────────────────────────────────────────────────


class JiraExporter:
    def __init__(self, config: JiraConfig, client: httpx.Client | None = None, timeout: float = 15.0):
        self.config = config
        self.base_url = config.url.rstrip("/")
        self._http = client or httpx.Client(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": "application/json",
        }

    def test_connection(self) -> ConnectionTestResult:
        try:
            data = _request_json(self._http, "GET", f"{self.base_url}/rest/api/2/myself", headers=self._headers())
        except ExportError as exc:
            logger.warning(f"[JIRA] Connection test failed: {exc}")
            return ConnectionTestResult(success=False, message="Failed to connect to Jira")
        return ConnectionTestResult(
            success=True,
            user=str(data.get("displayName", "")),
            message="Jira connection successful",
        )

    def build_issue(self, requirement: ExtractedRequirement) -> dict[str, Any]:
        return {
            "fields": {
                "project": {"key": self.config.project_key},
                "summary": requirement.title,
                "description": render_body(requirement),
                "issuetype": {"name": "Story"},
                "priority": {"name": requirement.priority.value.capitalize()},
                "labels": [_label(requirement.category.value), requirement.type.value],
            }
        }

    def create_issue(self, requirement: ExtractedRequirement) -> ExportResult:
        try:
            data = _request_json(
                self._http,
                "POST",
                f"{self.base_url}/rest/api/2/issue",
                headers=self._headers(),
                json=self.build_issue(requirement),
            )
        except ExportError as exc:
            logger.error(f"[JIRA] Issue creation failed for {requirement.id}: {exc}")
            return ExportResult(success=False, message=f"Failed to create Jira issue: {exc}")

        key = str(data.get("key", ""))
        logger.info(f"[JIRA] Created {key} for {requirement.id}")
        return ExportResult(
            success=True,
            reference=key,
            url=f"{self.base_url}/browse/{key}",
            message="Jira issue created successfully",
        )

    def close(self) -> None:
        self._http.close()


# ── Trello ───────────────────────────────────────────────


class TrelloExporter:
    def __init__(
        self,
        config: TrelloConfig,
        api_key: str,
        client: httpx.Client | None = None,
        timeout: float = 15.0,
    ):
        self.config = config
        self.api_key = api_key
        self._http = client or httpx.Client(timeout=timeout)

    def _auth(self) -> dict[str, str]:
        return {"key": self.api_key, "token": self.config.token}

    def test_connection(self) -> ConnectionTestResult:
        if not self.api_key:
            return ConnectionTestResult(success=False, message="Trello API key is not configured")
        try:
            data = _request_json(self._http, "GET", f"{TRELLO_API_URL}/members/me", params=self._auth())
        except ExportError as exc:
            logger.warning(f"[TRELLO] Connection test failed: {exc}")
            return ConnectionTestResult(success=False, message="Failed to connect to Trello")
        return ConnectionTestResult(
            success=True,
            user=str(data.get("fullName", "")),
            message="Trello connection successful",
        )

    def build_card(self, requirement: ExtractedRequirement) -> dict[str, str]:
        criteria = "\n".join(f"- {c}" for c in requirement.acceptance_criteria)
        desc = (
            f"{requirement.description}\n\n"
            f"**Type:** {requirement.type.value}\n"
            f"**Priority:** {requirement.priority.value}\n"
            f"**Category:** {requirement.category.value}\n\n"
            f"**Acceptance Criteria:**\n{criteria}"
        )
        return {"name": requirement.title, "desc": desc, "idList": self.config.list_id}

    def create_card(self, requirement: ExtractedRequirement) -> ExportResult:
        if not self.api_key:
            return ExportResult(success=False, message="Trello API key is not configured")
        try:
            data = _request_json(
                self._http,
                "POST",
                f"{TRELLO_API_URL}/cards",
                params={**self.build_card(requirement), **self._auth()},
            )
        except ExportError as exc:
            logger.error(f"[TRELLO] Card creation failed for {requirement.id}: {exc}")
            return ExportResult(success=False, message=f"Failed to create Trello card: {exc}")

        card_id = str(data.get("id", ""))
        logger.info(f"[TRELLO] Created card {card_id} for {requirement.id}")
        return ExportResult(
            success=True,
            reference=card_id,
            url=str(data.get("shortUrl", "")),
            message="Trello card created successfully",
        )

    def close(self) -> None:
        self._http.close()


# ── Rendering helpers ────────────────────────────────────


def render_body(requirement: ExtractedRequirement) -> str:
    """Description, user story, then the acceptance criteria as a bullet list."""
    criteria = "\n".join(f"* {c}" for c in requirement.acceptance_criteria)
    return (
        f"{requirement.description}\n\n"
        f"User Story:\n{generate_user_story(requirement)}\n\n"
        f"Acceptance Criteria:\n{criteria}"
    )


def generate_user_story(requirement: ExtractedRequirement) -> str:
    description = requirement.description
    if "system" in description.lower():
        want = re.sub("system", "I", description, flags=re.IGNORECASE)
    else:
        want = f"I want {description}"
    return f"As a user, {want}, so that I can achieve my goals efficiently."


def _label(value: str) -> str:
    # Jira labels cannot contain spaces
    return value.replace(" ", "_")


def _request_json(client: httpx.Client, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
    try:
        response = client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise ExportError(f"request failed: {exc}") from exc

    if not response.is_success:
        raise ExportError(f"{response.status_code} {_error_detail(response)}")
    try:
        data = response.json()
    except ValueError as exc:
        raise ExportError("unparsable response body") from exc
    return data if isinstance(data, dict) else {}


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("errors") or body.get("errorMessages") or body.get("message") or body)
    return str(body)


# ── Session export ───────────────────────────────────────


def build_session_export(
    requirements: Sequence[ExtractedRequirement],
    conversation: Sequence[ConversationTurn],
    now: datetime | None = None,
) -> SessionExport:
    return SessionExport(
        requirements=list(requirements),
        conversation=list(conversation),
        export_date=now or datetime.now(timezone.utc),
    )


def export_filename(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"requirements-{now.date().isoformat()}.json"
