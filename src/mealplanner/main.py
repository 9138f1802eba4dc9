"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from mealplanner.config import get_settings
from mealplanner.logging_config import LoggingContext, configure_logging, get_logger
from mealplanner.routers import ingredients_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Mealplanner API ({settings.environment})")
    yield
    logger.info("Shutting down Mealplanner API")


app = FastAPI(
    title="Mealplanner API",
    description="Ingredient parsing for family meal planning",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag every log line of a request with a request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(ingredients_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "mealplanner-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Mealplanner API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
