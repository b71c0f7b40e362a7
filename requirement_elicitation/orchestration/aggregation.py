"""
Requirement Aggregator: folds each turn's requirements into the
session's running list.
"""

from __future__ import annotations

from typing import Sequence

from requirement_elicitation.models.schemas import ExtractedRequirement


def merge_requirements(
    existing: Sequence[ExtractedRequirement],
    incoming: Sequence[ExtractedRequirement],
) -> list[ExtractedRequirement]:
    """Append the incoming requirements whose id is not already in *existing*."""
    known = {req.id for req in existing}
    return list(existing) + [req for req in incoming if req.id not in known]


def categorize(requirements: Sequence[ExtractedRequirement]) -> dict[str, list[ExtractedRequirement]]:
    """Group by category name, keeping first-seen category order."""
    grouped: dict[str, list[ExtractedRequirement]] = {}
    for req in requirements:
        grouped.setdefault(req.category.value, []).append(req)
    return grouped
