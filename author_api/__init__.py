# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.middleware.authentication import AuthenticationMiddleware

from author_api.auth import AuthBackend, on_auth_error
from author_api.logging import logger
from author_api.middlewares.correlation_id import CorrelationIDMiddleware
from author_api.middlewares.logging_context import LoggingContextMiddleware
from author_api.middlewares.prometheus import PrometheusMiddleware
from author_api.routing import collect_subrouters
from author_api.storage.db import engine, wait_and_init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    On startup waits until the database accepts connections; on shutdown
    releases pooled database connections.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    It registers the lifespan handler, includes the routers collected by
    `author_api.routing.collect_subrouters()`, and adds the middleware:
    - `CorrelationIDMiddleware`: request correlation IDs.
    - `AuthenticationMiddleware`: Keycloak bearer token authentication
      through `AuthBackend`; rejected tokens answer 401.
    - `LoggingContextMiddleware`: request fields for structured logs.
    - `PrometheusMiddleware`: request count, duration and in-flight metrics
      served on `/metrics`.
    """
    app = FastAPI(
        title="Author API",
        description="CRUD endpoints for authors with alert headers",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: PrometheusMiddleware → CorrelationIDMiddleware → AuthenticationMiddleware → LoggingContextMiddleware
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        AuthenticationMiddleware, backend=AuthBackend(), on_error=on_auth_error
    )
    app.add_middleware(CorrelationIDMiddleware)
    app.add_middleware(PrometheusMiddleware)

    return app
