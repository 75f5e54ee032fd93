"""
SQLAlchemy async engine and session management

``Database`` owns one engine and one session factory. It is constructed by
the DI container (``Container.database``) at the composition root and handed
to repositories and units of work; nothing in the service reaches for a
module-level engine.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


class Database:
    """Database class for managing async sessions following dependency-injector best practices"""

    def __init__(
        self,
        *,
        db_url: str,
        pool_size: int = 20,
        max_overflow: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
    ) -> None:
        engine_kwargs: dict[str, Any] = {'echo': echo, 'pool_pre_ping': True}
        if make_url(db_url).get_backend_name() != 'sqlite':
            engine_kwargs |= {
                'pool_size': pool_size,
                'max_overflow': max_overflow,
                'pool_timeout': pool_timeout,
                'pool_recycle': pool_recycle,
            }
        self._engine = create_async_engine(db_url, **engine_kwargs)
        if self._engine.dialect.name == 'sqlite':
            event.listen(self._engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions"""
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                Logger.base.warning('🔄 [DB] Session rollback because of exception')
                await session.rollback()
                raise

    async def create_db_and_tables(self) -> None:
        """Create tables that do not exist yet (tests and local runs; deployments use Alembic)"""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ensured')

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🗄️  [DB] Engine disposed')


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()
