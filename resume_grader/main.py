import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .agent import AgentManager
from .api import RequestIDMiddleware, health_check, v1_router, validation_exception_handler
from .core import settings, setup_logging
from .services import GradingService, load_training_set

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Training documents are read once and shared read-only by every request.
    training_set = load_training_set(settings.TRAINING_DATA_DIR, settings.TEMPLATE_URL)
    app.state.grading_service = GradingService(
        training_set=training_set,
        agent_manager=AgentManager(
            strategy="json",
            max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
        ),
        template_url=settings.TEMPLATE_URL,
        sentinel_author=settings.TEMPLATE_AUTHOR_SENTINEL,
    )
    logger.info(f"{settings.PROJECT_NAME} started with model {settings.LL_MODEL}")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down")


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Upload a resume PDF and get a grade (S, A, B, C) with red and yellow flags.",
        lifespan=lifespan,
    )
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(health_check)
    app.include_router(v1_router)
    return app


app = create_app()
