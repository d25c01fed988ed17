"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, profile_rag.api, profile_rag.observability, profile_rag.configs
System role: Application initialization and configuration
"""

import asyncio
import logging
import os
import signal
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from profile_rag.api import api_router
from profile_rag.application.services import AnswerService, create_chat_model
from profile_rag.configs import Settings, get_settings
from profile_rag.core.retrieval import RetrievalOrchestrator, create_orchestrator
from profile_rag.observability.logger import configure_logging
from profile_rag.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def _stop_on_failed_start(task: asyncio.Task) -> None:
    """Terminate the server when the background initial load fails."""
    if task.cancelled() or task.exception() is None:
        return
    logger.critical(
        "Initial collection load failed, shutting down",
        exc_info=task.exception(),
    )
    os.kill(os.getpid(), signal.SIGTERM)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the orchestrator and answer service, then loads or builds the
    collection. A failed initial build aborts startup.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    orchestrator: RetrievalOrchestrator = getattr(app.state, "orchestrator", None) or create_orchestrator(settings)
    app.state.orchestrator = orchestrator
    if getattr(app.state, "answer_service", None) is None:
        app.state.answer_service = AnswerService(
            orchestrator=orchestrator,
            chat_model=create_chat_model(
                model=settings.generation.model,
                temperature=settings.generation.temperature,
            ),
        )

    startup_task = None
    if settings.retrieval.background_startup:
        startup_task = asyncio.create_task(orchestrator.start())
        startup_task.add_done_callback(_stop_on_failed_start)
        logger.info("Initial collection load running in background")
    else:
        await orchestrator.start()
        logger.info(f"Application startup complete: {orchestrator.status().chunk_count} chunks loaded")

    yield

    if startup_task is not None and not startup_task.done():
        startup_task.cancel()
    logger.info("Application shutdown")


def create_app(
    settings: Settings | None = None,
    orchestrator: RetrievalOrchestrator | None = None,
    answer_service: AnswerService | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (loaded from environment if None)
        orchestrator: Pre-built orchestrator (created from settings if None)
        answer_service: Pre-built answer service (Gemini chat model if None)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Profile RAG API",
        description="Career profile chatbot with retrieval-augmented answers",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.orchestrator = orchestrator
    app.state.answer_service = answer_service

    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        index = app.state.orchestrator.index if app.state.orchestrator else None
        return f"OK. Store loaded with {len(index) if index is not None else 0} chunks."

    return app


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "profile_rag.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
