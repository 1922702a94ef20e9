"""
AJIS Main Entry Point

Serves the assistant over HTTP.
"""

from contextlib import asynccontextmanager
from typing import Any, Optional

import uvicorn
import structlog
from fastapi import FastAPI
from pydantic import BaseModel

from common.config import VERSION, Settings
from common.logging_config import configure_logging
from .agent import AssistantAgent


logger = structlog.get_logger()


class RespondRequest(BaseModel):
    """Body of POST /respond. ``text`` is validated by the agent, not here."""
    text: Any = None
    persona: Optional[str] = None


class RespondResponse(BaseModel):
    response: str
    intent: Optional[str] = None
    outcome: str


def create_app(
    settings: Optional[Settings] = None,
    agent: Optional[AssistantAgent] = None,
) -> FastAPI:
    """Create the AJIS FastAPI application."""
    settings = settings or Settings.from_env()
    agent = agent or AssistantAgent.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await agent.connect()
        logger.info("AJIS started", version=VERSION)
        yield
        await agent.disconnect()
        logger.info("AJIS stopped")

    app = FastAPI(
        title="AJIS",
        description="Adaptive anime assistant: recaps, title info and availability hints",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.agent = agent

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "agent": "AJIS", "version": VERSION}

    @app.post("/respond", response_model=RespondResponse)
    async def respond(request: RespondRequest) -> RespondResponse:
        """Answer one request; failures come back as plain text, never errors."""
        result = await agent.process(request.text)
        return RespondResponse(
            response=agent.format(result, request.persona),
            intent=result.intent_result.intent.value if result.intent_result else None,
            outcome=result.outcome.kind.value,
        )

    return app


if __name__ == "__main__":
    import argparse

    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="AJIS Assistant Server")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to run on")
    parser.add_argument("--host", type=str, default=settings.host, help="Host to bind to")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    logger.info("Starting AJIS", port=args.port, host=args.host)

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )
