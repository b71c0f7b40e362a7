"""
FastAPI application factory and API package.

Run with:
    uvicorn requirement_elicitation.api:app --reload --port 8000

Or via main.py:
    python -m requirement_elicitation.main --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from requirement_elicitation.config import get_settings
from requirement_elicitation.api.routes import chat_router, health_router, integrations_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory: create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="Requirement Elicitation API",
        description="Conversational requirement capture with Gemini and local fallback",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS: allow the frontend (adjust origins in production)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(chat_router, prefix="/api", tags=["Chat"])
    application.include_router(
        integrations_router, prefix="/api/integrations", tags=["Integrations"]
    )

    @application.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        logger.warning(f"[API] Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn requirement_elicitation.api:app`
app = create_app()
