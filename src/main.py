"""
Production FastAPI Application

Serve with granian:
    granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [TicketCare] Starting up...')

    # Setup OpenTelemetry tracing
    tracing = TracingConfig(
        service_name=settings.SERVICE_NAME,
        otlp_endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
    )
    tracing.setup()
    Logger.base.info('📊 [TicketCare] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [TicketCare] Dependency injection wired')

    # Database engine
    database = container.database()
    tracing.instrument_sqlalchemy(engine=database.engine)
    Logger.base.info('🗄️  [TicketCare] Database engine ready + instrumented')

    Logger.base.info('✅ [TicketCare] Ready to serve requests')

    yield

    Logger.base.info('🛑 [TicketCare] Shutting down...')

    await database.dispose()

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [TicketCare] Tracing shutdown complete')

    # Unwire DI
    container.unwire()
    cleanup()

    Logger.base.info('👋 [TicketCare] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='TicketCare API - organizer dashboard and storefront lists, ticket type provisioning',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
