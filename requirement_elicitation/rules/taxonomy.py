"""
Keyword Taxonomy: lexical cues that drive requirement classification.

Pure lookup tables. Category order matters: the first category whose
keyword set matches wins, so "login should be secure" lands in
Authentication before Security is consulted.
"""

from __future__ import annotations

from pydantic import BaseModel

from requirement_elicitation.models.enums import RequirementCategory, RequirementType


class KeywordTaxonomy(BaseModel):
    """Keyword tables consulted by the requirement extractor."""

    functional_keywords: tuple[str, ...] = (
        "user can",
        "user should",
        "system should",
        "application must",
        "feature",
        "functionality",
        "login",
        "register",
        "create",
        "update",
        "delete",
        "search",
        "filter",
        "navigate",
        "display",
        "show",
        "hide",
        "submit",
        "validate",
        "authenticate",
    )
    non_functional_keywords: tuple[str, ...] = (
        "performance",
        "security",
        "usability",
        "scalability",
        "reliability",
        "availability",
        "maintainability",
        "portability",
        "response time",
        "throughput",
        "load time",
        "concurrent users",
        "uptime",
        "backup",
        "fast",
        "secure",
    )
    categories: tuple[tuple[RequirementCategory, tuple[str, ...]], ...] = (
        (RequirementCategory.AUTHENTICATION, ("login", "register", "password", "auth", "signin", "signup")),
        (RequirementCategory.USER_MANAGEMENT, ("user", "profile", "account", "permissions", "role")),
        (RequirementCategory.DATA_PROCESSING, ("data", "process", "calculate", "transform", "validate")),
        (RequirementCategory.API_INTEGRATION, ("api", "integration", "external", "service", "endpoint")),
        (RequirementCategory.SECURITY, ("security", "encrypt", "decrypt", "secure", "protection")),
        (RequirementCategory.PERFORMANCE, ("performance", "speed", "fast", "optimize", "cache")),
        (RequirementCategory.UI_UX, ("interface", "design", "layout", "responsive", "mobile", "desktop")),
        (RequirementCategory.REPORTING, ("report", "analytics", "dashboard", "metrics", "export")),
    )
    high_priority_keywords: tuple[str, ...] = ("critical", "urgent", "must", "required", "essential")
    low_priority_keywords: tuple[str, ...] = ("nice to have", "optional", "future", "enhancement")

    acceptance_criteria: dict[RequirementType, tuple[str, str, str]] = {
        RequirementType.FUNCTIONAL: (
            "Feature behaves as described",
            "All edge cases are handled appropriately",
            "User interface is intuitive and accessible",
        ),
        RequirementType.NON_FUNCTIONAL: (
            "Performance meets specified requirements",
            "System maintains stability under load",
            "Quality attributes are measurable and testable",
        ),
    }

    model_config = {"frozen": True}


DEFAULT_TAXONOMY = KeywordTaxonomy()
