"""
Local generation: the rule-based fallback used when Gemini is not
reachable. It never calls out and always answers with status=fallback.
"""

from __future__ import annotations

import logging
import random
import re
from typing import Sequence

from requirement_elicitation.models.enums import RequirementType, TurnStatus, TurnType
from requirement_elicitation.models.schemas import ConversationTurn, TurnResult
from requirement_elicitation.rules.extractor import RequirementExtractor
from requirement_elicitation.services.generation.base import GenerationStrategy

logger = logging.getLogger(__name__)

GREETING_KEYWORDS = ("hello", "hi", "start")
HELP_KEYWORDS = ("help", "how")

FUNCTIONAL_FOLLOW_UP = """I've captured a functional requirement about {category}. To better understand this requirement, could you provide more details about:

• The specific user actions or workflows involved
• Any business rules or validation requirements
• Expected system behavior in different scenarios
• Integration points with other systems or features

This will help me create more detailed acceptance criteria and identify any dependencies."""

NON_FUNCTIONAL_FOLLOW_UP = """I've noted a non-functional requirement related to {category}. To properly specify this requirement, could you help me understand:

• Specific performance targets or thresholds
• Measurement criteria and testing approaches
• Expected load conditions or usage patterns
• Any compliance or regulatory considerations

This information will help ensure the requirement is testable and achievable."""

ONBOARDING_MESSAGE = """Hello! I'm here to help you capture and refine your software requirements. Let's start by discussing your project goals.

Could you tell me:
• What type of software or system are you planning to develop?
• Who are the main users or stakeholders?
• What are the primary business objectives you want to achieve?

Feel free to describe your needs in your own words - I'll help organize them into clear, actionable requirements."""

HELP_MESSAGE = """I can help you capture and organize software requirements through our conversation. Here's how we can work together:

**What I can do:**
• Extract functional and non-functional requirements from your descriptions
• Ask clarifying questions to refine vague or incomplete requirements
• Categorize requirements by type and priority
• Generate acceptance criteria and identify dependencies
• Export requirements to Jira or Trello for your development team

**How to get started:**
Simply describe what you need your software to do, who will use it, and what problems it should solve. I'll guide you through the details!

What aspect of your project would you like to discuss first?"""

CLARIFYING_QUESTIONS = (
    "I'd like to understand your requirements better. Could you describe the main "
    "functionality you need in more detail?",
    "To help capture your requirements effectively, could you tell me more about:\n"
    "• The specific user roles or personas involved\n"
    "• The key workflows or processes you want to support\n"
    "• Any constraints or limitations I should be aware of",
    "Let's break this down further. What are the most critical features for your first "
    "release? We can prioritize requirements based on business value and user needs.",
    "I want to make sure I understand correctly. Could you walk me through a typical user "
    "scenario or use case? This will help me identify the detailed requirements.",
    "To provide better guidance, it would help to know:\n"
    "• What platforms or technologies you're considering\n"
    "• Any integration requirements with existing systems\n"
    "• Performance or scalability expectations",
)


class LocalGenerationService(GenerationStrategy):
    name = "local"

    def __init__(self, extractor: RequirementExtractor, rng: random.Random | None = None):
        self.extractor = extractor
        self.rng = rng or random.Random()

    def generate(self, message: str, history: Sequence[ConversationTurn]) -> TurnResult:
        requirements = self.extractor.extract(message)

        if requirements:
            first = requirements[0]
            template = (
                FUNCTIONAL_FOLLOW_UP
                if first.type == RequirementType.FUNCTIONAL
                else NON_FUNCTIONAL_FOLLOW_UP
            )
            response = template.format(category=first.category.value.lower())
            turn_type = TurnType.REQUIREMENT
        elif _mentions(message, GREETING_KEYWORDS):
            response = ONBOARDING_MESSAGE
            turn_type = TurnType.GENERAL
        elif _mentions(message, HELP_KEYWORDS):
            response = HELP_MESSAGE
            turn_type = TurnType.GENERAL
        else:
            response = self.rng.choice(CLARIFYING_QUESTIONS)
            turn_type = TurnType.CLARIFICATION

        logger.info(
            f"[LOCAL] type={turn_type.value} | requirements={len(requirements)}"
        )
        return TurnResult(
            response=response,
            type=turn_type,
            requirements=requirements,
            status=TurnStatus.FALLBACK,
        )


def _mentions(message: str, keywords: tuple[str, ...]) -> bool:
    """Keyword at the start of any word: "started" counts, "this" does not."""
    lower = message.lower()
    return any(re.search(rf"\b{re.escape(keyword)}", lower) for keyword in keywords)
