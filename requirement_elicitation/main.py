"""
Requirement Elicitation: Main Entry Point

Chat in the terminal:
    python -m requirement_elicitation

Run as an API server (for the frontend):
    python -m requirement_elicitation --serve
    # or: uvicorn requirement_elicitation.api:app --reload --port 8000

Or drive a session programmatically:
    from requirement_elicitation.main import new_session
    session = new_session()
    session.send("The system must allow users to login securely")
"""

from __future__ import annotations

import logging
import random
import sys

from requirement_elicitation.config import get_settings
from requirement_elicitation.orchestration import ChatSession, build_orchestrator
from requirement_elicitation.utils.ids import RequirementIdFactory
from requirement_elicitation.utils.logger import setup_logging


def new_session() -> ChatSession:
    settings = get_settings()
    orchestrator = build_orchestrator(
        settings.generation_config(),
        RequirementIdFactory(),
        random.Random(settings.random_seed),
    )
    return ChatSession(orchestrator)


def run() -> ChatSession:
    """Interactive chat loop. `/export` prints the session, `/quit` exits."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    session = new_session()
    logger.info(f"{settings.app_name}: type /quit to exit, /export to dump the session")

    while True:
        try:
            text = input("you> ")
        except (EOFError, KeyboardInterrupt):
            break
        command = text.strip().lower()
        if command in ("/quit", "/exit"):
            break
        if command == "/export":
            print(session.export().model_dump_json(indent=2))
            continue
        if not command:
            continue

        result = session.send(text)
        print(f"bot> {result.response}\n")
        for req in result.requirements:
            print(f"  + [{req.type.value} | {req.priority.value} | {req.category.value}] {req.title}")

    _print_summary(session)
    return session


def _print_summary(session: ChatSession) -> None:
    logger = logging.getLogger(__name__)
    logger.info("-" * 60)
    logger.info(f"  Turns:          {len(session.turns)}")
    logger.info(f"  Requirements:   {len(session.requirements)} captured")
    for req in session.requirements:
        logger.info(f"    {req.id} | {req.type.value} | {req.priority.value} | {req.title}")
    logger.info("-" * 60)


def serve(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Start the FastAPI server (for frontend communication)."""
    import uvicorn

    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("requirement_elicitation.api:app", host=host, port=port, reload=True)


if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    else:
        run()
