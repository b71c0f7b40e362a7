"""
Requirement Extractor: turns one user utterance into structured
requirement records using plain substring matching against the
keyword taxonomy.

Matching is plain substring containment: "insecure" matches "secure", and a
segment with a functional cue is functional even when it also carries
non-functional cues.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from requirement_elicitation.models.enums import (
    Priority,
    RequirementCategory,
    RequirementType,
)
from requirement_elicitation.models.schemas import ExtractedRequirement
from requirement_elicitation.rules.taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy
from requirement_elicitation.utils.ids import RequirementIdFactory

logger = logging.getLogger(__name__)

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_WORD = re.compile(r"\S+")
_MAX_TITLE_WORDS = 8


class RequirementExtractor:
    """Keyword-driven requirement extraction and classification."""

    def __init__(
        self,
        id_factory: RequirementIdFactory | None = None,
        taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY,
    ):
        self.id_factory = id_factory or RequirementIdFactory()
        self.taxonomy = taxonomy

    # ── Public API ───────────────────────────────────────

    def extract(self, text: str, split_sentences: bool = True) -> list[ExtractedRequirement]:
        """
        Extract requirements from *text*.

        With split_sentences=False the whole message is one segment.
        Returns an empty list when nothing matches.
        """
        segments = split_segments(text) if split_sentences else [text]
        segments = [s for s in segments if s.strip()]
        if not segments:
            return []

        token = self.id_factory.next_token()
        created_at = datetime.now(timezone.utc)
        requirements: list[ExtractedRequirement] = []

        for position, segment in enumerate(segments):
            requirement = self._build_requirement(segment, token, position, created_at)
            if requirement is not None:
                requirements.append(requirement)

        logger.debug(
            f"[EXTRACT] {len(segments)} segment(s) → {len(requirements)} requirement(s)"
        )
        return requirements

    # ── Classification helpers ───────────────────────────

    def classify_type(self, lower_text: str) -> RequirementType | None:
        if _contains_any(lower_text, self.taxonomy.functional_keywords):
            return RequirementType.FUNCTIONAL
        if _contains_any(lower_text, self.taxonomy.non_functional_keywords):
            return RequirementType.NON_FUNCTIONAL
        return None

    def classify_category(self, lower_text: str) -> RequirementCategory:
        for category, keywords in self.taxonomy.categories:
            if _contains_any(lower_text, keywords):
                return category
        return RequirementCategory.GENERAL

    def classify_priority(self, lower_text: str) -> Priority:
        if _contains_any(lower_text, self.taxonomy.high_priority_keywords):
            return Priority.HIGH
        if _contains_any(lower_text, self.taxonomy.low_priority_keywords):
            return Priority.LOW
        return Priority.MEDIUM

    # ── Internals ────────────────────────────────────────

    def _build_requirement(
        self,
        segment: str,
        token: int,
        position: int,
        created_at: datetime,
    ) -> ExtractedRequirement | None:
        lower = segment.lower().strip()
        req_type = self.classify_type(lower)
        if req_type is None:
            return None

        description = segment.strip()
        return ExtractedRequirement(
            id=self.id_factory.make_id(token, position),
            title=make_title(description),
            description=description,
            type=req_type,
            priority=self.classify_priority(lower),
            category=self.classify_category(lower),
            acceptance_criteria=self.taxonomy.acceptance_criteria[req_type],
            estimated_effort="TBD",
            dependencies=(),
            created_at=created_at,
        )


def split_segments(text: str) -> list[str]:
    """Split on terminal punctuation, dropping empty pieces."""
    return [s for s in _SENTENCE_BOUNDARY.split(text) if s.strip()]


def make_title(description: str) -> str:
    """First eight words of the description, with an ellipsis if cut.

    The title is sliced from the description itself, so its spacing is kept.
    """
    words = list(_WORD.finditer(description))
    if len(words) <= _MAX_TITLE_WORDS:
        return description
    return description[: words[_MAX_TITLE_WORDS - 1].end()] + "..."


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)
