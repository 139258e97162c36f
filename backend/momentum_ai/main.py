import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from momentum_ai.config import settings
from momentum_ai.errors import AskAIError, ConfigurationError, UpstreamError, ValidationError
from momentum_ai.logging_config import setup_logging
from momentum_ai.routes import ai, health
from momentum_ai.schemas.ask import AskResponse

logger = logging.getLogger(__name__)

PROCESSING_FAILED = "Failed to process your question"


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(settings.log_level)
    if not settings.ai_configured:
        logger.warning("GEMINI_API_KEY not set; Ask AI requests will fail")
    if not settings.auth_configured:
        logger.warning("JWT_SECRET not set; every Ask AI request will be refused")
    yield


def _envelope(status_code: int, message: str, errors: list | None = None) -> JSONResponse:
    body = AskResponse(success=False, message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _ask_ai_error_handler(_: Request, exc: AskAIError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        logger.error("Ask AI is not configured: %s", exc.message)
    elif isinstance(exc, UpstreamError):
        logger.warning("Upstream generation failed")
    errors = exc.errors if isinstance(exc, ValidationError) else None
    return _envelope(exc.status_code, exc.message, errors)


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())[1:]) or "body", "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return _envelope(400, "Invalid request", errors)


async def _unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Ask AI error", exc_info=exc)
    return _envelope(500, PROCESSING_FAILED)


def create_app() -> FastAPI:
    app = FastAPI(title="Momentum Ask AI", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AskAIError, _ask_ai_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health.router)
    app.include_router(ai.router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("momentum_ai.main:app", host="0.0.0.0", port=8000)
