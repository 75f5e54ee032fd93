"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
CORS is answered per route (explicit headers and OPTIONS responders), so no
CORS middleware is installed here.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.ticketcare.driving_adapter.http_controller.attendee_controller import (
    router as attendee_router,
)
from src.service.ticketcare.driving_adapter.http_controller.catalog_controller import (
    router as catalog_router,
)
from src.service.ticketcare.driving_adapter.http_controller.order_controller import (
    router as order_router,
)
from src.service.ticketcare.driving_adapter.http_controller.organizer_controller import (
    router as organizer_router,
)
from src.service.ticketcare.driving_adapter.http_controller.upload_controller import (
    router as upload_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'TicketCare API',
    service_name: str = settings.SERVICE_NAME,
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(catalog_router, prefix='/api', tags=['catalog'])
    app.include_router(order_router, prefix='/api/orders', tags=['order'])
    app.include_router(attendee_router, prefix='/api', tags=['attendee'])
    app.include_router(upload_router, prefix='/api/upload', tags=['upload'])
    app.include_router(organizer_router, prefix='/api/organizer', tags=['organizer'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
