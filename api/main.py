"""
api/main.py -- FastAPI application factory for PizzaStore.

Run with:  uvicorn asgi:app --reload
           python main.py --environment Development

create_app() takes a Settings instance and threads it through the whole app:
it is stored on app.state.settings, where the login route reads the token
lifetime and the auth gate reads the signing key. Nothing below this module
calls get_settings().

Middleware stack (outermost to innermost):
  1. log_requests   -- one INFO line per request with status and latency
  2. CORSMiddleware -- adds CORS headers for allowed browser origins

Lifespan creates the two in-memory stores on startup. They live exactly as
long as the process; nothing is persisted on shutdown.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorDetail, ErrorResponse, HealthResponse
from api.routes.auth import router as auth_router
from api.routes.pizzas import router as pizzas_router
from api.routes.users import router as users_router
from auth.store import UserStore
from core.config import Settings, get_settings
from pizza.store import PizzaStore

VERSION = "1.0.0"

logger = logging.getLogger("pizzastore.api")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the in-memory stores on startup.

    Everything before yield runs on startup; everything after yield runs on
    shutdown. Each startup gets empty stores, so a TestClient context gives a
    test module a clean slate.
    """
    settings: Settings = app.state.settings
    logger.info("PizzaStore API starting up (environment=%s)", settings.environment)
    app.state.user_store = UserStore()
    app.state.pizza_store = PizzaStore()
    logger.info("Stores initialized")

    yield

    logger.info(
        "PizzaStore API shutdown complete (%d users, %d pizzas discarded)",
        app.state.user_store.count(),
        len(app.state.pizza_store.list_pizzas()),
    )


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured PizzaStore application.

    The docs UI and the OpenAPI document are only served in Development,
    at /swagger and /swagger/v1/swagger.json.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    dev = settings.is_development
    app = FastAPI(
        title="PizzaStore API",
        description="Making the Pizzas you love",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/swagger" if dev else None,
        redoc_url=None,
        openapi_url="/swagger/v1/swagger.json" if dev else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Location"],
        max_age=3600,
    )
    app.middleware("http")(log_requests)

    app.include_router(auth_router, tags=["Authentication"])
    app.include_router(users_router, tags=["User Management"])
    app.include_router(pizzas_router, tags=["PizzaStore"])

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Defined here rather than in a router so it is reachable regardless of
    # router registration. No auth: load balancers probe it anonymously.
    @app.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        """Return API liveness and current version."""
        return HealthResponse(version=VERSION)

    return app


# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Exception handlers
#
# All handlers return the same ErrorResponse envelope so API clients can parse
# errors uniformly without inspecting status codes to choose a schema.
# ---------------------------------------------------------------------------


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return a structured error for all FastAPI/Starlette HTTP exceptions.

    Route handlers raise HTTPException with a dict detail ({code, message}).
    When detail is already a structured dict, use it directly as the error
    field. Framework-raised errors (unknown path, wrong method) carry a plain
    string and are wrapped.
    """
    headers = getattr(exc, "headers", None)
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=headers)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=f"http_{exc.status_code}",
                message=str(exc.detail),
            )
        ).model_dump(),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with a structured error when the body or path params fail validation."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=ErrorDetail(
                code="validation_error",
                message="Request validation failed.",
                detail=str(exc.errors()),
            )
        ).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected server errors.

    The raw exception goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorDetail(
                code="internal_error",
                message="An unexpected error occurred.",
            )
        ).model_dump(),
    )
