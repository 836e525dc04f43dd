"""Main FastAPI application for the Fuzzy Lexicon."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    suggest_router,
    vocabulary_router,
    check_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .engine_instance import lexicon
from .models.response import ErrorResponse

settings = get_settings()


def select_renderer(log_format: str):
    """JSON lines for "json", human-readable console output otherwise."""
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        select_renderer(settings.log_format),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

FALLBACK_VOCABULARY = [
    "hello", "hallo", "help", "world", "word", "words", "spell", "spelling",
    "check", "checker", "correct", "correction", "search", "tree", "trie",
    "distance", "letter", "letters", "language", "dictionary", "suggest",
    "suggestion", "the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Fuzzy Lexicon service", version=settings.app_version)

    try:
        if settings.dictionary_path:
            lexicon.load_dictionary_file(settings.dictionary_path, settings.min_word_length)
        else:
            added = lexicon.load_vocabulary(FALLBACK_VOCABULARY)
            logger.info("Fallback vocabulary loaded", total_words=added)
    except FileNotFoundError:
        logger.warning(
            "Dictionary file not found, using fallback vocabulary",
            path=settings.dictionary_path,
        )
        added = lexicon.load_vocabulary(FALLBACK_VOCABULARY)
        logger.info("Fallback vocabulary loaded", total_words=added)
    except Exception as e:
        logger.error("Failed to load vocabulary", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Fuzzy Lexicon service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Approximate string matching service for spelling suggestions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(suggest_router)
app.include_router(vocabulary_router)
app.include_router(check_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Approximate string matching service for spelling suggestions",
        "strategies": ["trie", "kdtree", "astar"],
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fuzzy_lexicon.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
