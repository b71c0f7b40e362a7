"""
Health check: makes a tiny generation call and reports whether the chat
will run against Gemini (`connected`) or the local rules (`fallback`).
"""

from __future__ import annotations

import logging

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.models.enums import ApiStatus
from requirement_elicitation.models.schemas import HealthStatus
from requirement_elicitation.services.errors import (
    GenerationProtocolError,
    ServiceUnavailableError,
)
from requirement_elicitation.services.llm_service import GeminiClient

logger = logging.getLogger(__name__)


def check_health(config: GenerationConfig, client: GeminiClient | None = None) -> HealthStatus:
    if not config.has_credential:
        return HealthStatus(status=ApiStatus.FALLBACK, message="No API key configured")

    owned = client is None
    client = client or GeminiClient(config)
    try:
        data = client.post_generate("Hello", temperature=0.1, max_output_tokens=10)
    except ServiceUnavailableError as exc:
        logger.warning(f"[HEALTH] Connection test failed: {exc}")
        return HealthStatus(status=ApiStatus.FALLBACK, message=f"Connection test failed: {exc}")
    except GenerationProtocolError as exc:
        logger.warning(f"[HEALTH] {exc}")
        message = str(exc)
        if exc.status_code is not None:
            message = f"API error: {exc.status_code} - {exc.body}"
        return HealthStatus(status=ApiStatus.FALLBACK, message=message)
    except Exception as exc:
        logger.exception(f"[HEALTH] Unexpected failure: {exc}")
        return HealthStatus(status=ApiStatus.FALLBACK, message=f"Connection test failed: {exc}")
    finally:
        if owned:
            client.close()

    if data.get("candidates"):
        return HealthStatus(status=ApiStatus.CONNECTED, message="Gemini API connected successfully")
    return HealthStatus(status=ApiStatus.FALLBACK, message="API response format unexpected")
