"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.event.in_memory_broadcaster import InMemoryRevalidationBroadcasterImpl
from src.platform.metrics.ticketcare_metrics import metrics
from src.service.ticketcare.driven_adapter.repo.attendee_query_repo_impl import (
    AttendeeQueryRepoImpl,
)
from src.service.ticketcare.driven_adapter.repo.catalog_query_repo_impl import (
    CatalogQueryRepoImpl,
)
from src.service.ticketcare.driven_adapter.repo.order_query_repo_impl import OrderQueryRepoImpl
from src.service.ticketcare.driven_adapter.storage.s3_object_storage_impl import (
    S3ObjectStorageImpl,
)
from src.service.ticketcare.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine + session factory built from config_service)
    database = providers.Singleton(
        Database,
        db_url=config_service.provided.DATABASE_URL_ASYNC,
        pool_size=config_service.provided.DB_POOL_SIZE,
        max_overflow=config_service.provided.DB_MAX_OVERFLOW,
        pool_timeout=config_service.provided.DB_POOL_TIMEOUT,
        pool_recycle=config_service.provided.DB_POOL_RECYCLE,
    )

    # Writes: one unit of work (session + transaction) per use-case call
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - use session_factory per-request)
    catalog_query_repo = providers.Singleton(
        CatalogQueryRepoImpl, session_factory=database.provided.session
    )
    order_query_repo = providers.Singleton(
        OrderQueryRepoImpl, session_factory=database.provided.session
    )
    attendee_query_repo = providers.Singleton(
        AttendeeQueryRepoImpl, session_factory=database.provided.session
    )

    # Page revalidation fan-out (in-process)
    page_revalidator = providers.Singleton(InMemoryRevalidationBroadcasterImpl)

    # Object storage for uploads
    object_storage = providers.Singleton(S3ObjectStorageImpl, settings=config_service)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # Business metrics (module-level registry, never re-created)
    ticketcare_metrics = providers.Object(metrics)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
