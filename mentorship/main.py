"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware and exception
handlers, and configures lifespan.

Dependencies: fastapi, mentorship.api, mentorship.observability, mentorship.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentorship.api import api_router
from mentorship.api.errors import register_exception_handlers
from mentorship.configs import get_settings
from mentorship.observability.logger import configure_logging
from mentorship.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={
            "min_lead_time_hours": settings.scheduling.min_lead_time_hours,
        },
    )

    yield

    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.api.title,
        description="Mentor and session management behind a request validation gate",
        version=settings.api.version,
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api.prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "mentorship.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
    )
