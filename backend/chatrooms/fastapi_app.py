"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /api/chat  rooms, membership, messages
- /api/user  global user directory
"""

import logging
from contextlib import asynccontextmanager

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chatrooms.config.logging_config import correlation_id_var, setup_logging
from chatrooms.config.settings import Config
from chatrooms.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatrooms.presentation.api import chat_router, users_router
from chatrooms.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_fastapi_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Every app gets its own DI container, hence its own in-memory stores.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    # Created before the app starts: Dishka adds middleware, which must happen before startup
    container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Chat Rooms API",
        description="In-memory chat rooms with a global user directory",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== DOMAIN ERRORS ====================

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        logger.info("[VALIDATION] %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info("[NOT FOUND] %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        logger.info("[CONFLICT] %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_409_CONFLICT, str(exc))

    # ==================== FRAMEWORK ERRORS ====================

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Pydantic error entries may carry exception objects in 'ctx'
        errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
        logger.info("[VALIDATION ERROR] %s", errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info("[HTTP ERROR %s] %s", exc.status_code, exc.detail)
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("[GLOBAL ERROR] %s: %s", type(exc).__name__, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(chat_router)  # /api/chat
    app.include_router(users_router)  # /api/user

    return app


# Create the app instance
app = create_fastapi_app()
