"""FastAPI app entry: config, logging, tokenizer readiness, health, and graceful shutdown."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rsvp_segmenter.config.logging import configure_logging, get_logger
from rsvp_segmenter.config.settings import get_settings
from rsvp_segmenter.controllers.routes.chunks import router as chunks_router
from rsvp_segmenter.controllers.routes.segment import router as segment_router
from rsvp_segmenter.resources.tokenizer.client import close_tokenizer, init_tokenizer, ping_tokenizer
from rsvp_segmenter.services.tokenizer.base import TokenizerError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and tokenizer warm-up. Shutdown: release the tokenizer."""
    settings = get_settings()
    configure_logging()
    logger.info(
        "Application starting",
        extra={
            "app_name": settings.app_name,
            "environment": settings.environment,
            "tokenizer": settings.tokenizer_strategy,
        },
    )
    try:
        await init_tokenizer()
    except TokenizerError as e:
        logger.error("Tokenizer failed to initialize on startup", extra={"error": str(e)})
        # Don't fail startup; /ready reports it and segment requests retry initialization
    yield
    logger.info("Application shutting down")
    close_tokenizer()
    logger.info("Shutdown complete")


app = FastAPI(
    title="RSVP Segmenter",
    description="Split Japanese text into reading chunks for rapid serial visual presentation",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(segment_router)
app.include_router(chunks_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check the tokenizer."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> JSONResponse:
    """Readiness: the tokenizer has finished initializing."""
    tokenizer = ping_tokenizer()
    ok = tokenizer.get("ok", False)
    body = {
        "status": "ok" if ok else "degraded",
        "tokenizer": {"ok": ok, "error": tokenizer.get("error"), "strategy": tokenizer.get("strategy")},
    }
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(TokenizerError)
async def tokenizer_exception_handler(_request: Request, exc: TokenizerError):
    logger.warning("Tokenizer error", extra={"error": str(exc)})
    return JSONResponse(
        content={"detail": "The tokenizer is temporarily unavailable. Please retry later."},
        status_code=503,
    )


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: do not leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
