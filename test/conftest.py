"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database per test session (per xdist worker)
- The test app client (session scoped) and table cleanup between tests
- A synchronous ORM session for seeding rows and checking results

Architecture:
- Unit tests (@pytest.mark.unit): mocks only, no database, no app
- Integration tests: real app over HTTP against the SQLite file
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Point the app at a temporary SQLite file before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.mkdtemp(prefix=f'ticketcare_test_{worker_id}_'))
    os.environ['TEST_DB_PATH'] = str(db_dir / 'ticketcare_test.db')
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{os.environ["TEST_DB_PATH"]}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from src.platform.database.orm_db_setting import Base  # noqa: E402
import src.service.ticketcare.driven_adapter.model  # noqa: E402, F401


# =============================================================================
# Pytest Hooks: integration tests always start from empty tables
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def sync_engine() -> Generator[Engine, None, None]:
    """Second, synchronous connection to the same file, for seeding and assertions."""
    engine = create_engine(f'sqlite:///{os.environ["TEST_DB_PATH"]}')
    yield engine
    engine.dispose()


@pytest.fixture(scope='function')
def clean_database(client: TestClient, sync_engine: Engine) -> Generator[None, None, None]:
    # client first: its lifespan creates the tables
    with sync_engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def db_session(sync_engine: Engine) -> Generator[Session, None, None]:
    """Seed with ``db_session.add(...)`` then ``db_session.commit()`` before calling the API."""
    with Session(sync_engine, expire_on_commit=False) as session:
        yield session


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
