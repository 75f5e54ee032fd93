"""
Conftest for pure unit tests - no database, no app.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def uow():
    """Unit of work whose repositories are AsyncMocks."""
    mock_uow = MagicMock()
    mock_uow.__aenter__ = AsyncMock(return_value=mock_uow)
    mock_uow.__aexit__ = AsyncMock(return_value=False)
    mock_uow.commit = AsyncMock()
    mock_uow.rollback = AsyncMock()
    mock_uow.ticket_type_command_repo = AsyncMock()
    mock_uow.inventory_command_repo = AsyncMock()
    mock_uow.time_slot_command_repo = AsyncMock()
    return mock_uow


@pytest.fixture
def page_revalidator():
    revalidator = MagicMock()
    revalidator.revalidate = AsyncMock()
    return revalidator


@pytest.fixture
def sale_window():
    return (
        datetime(2025, 6, 1, tzinfo=timezone.utc),
        datetime(2025, 7, 15, 18, 0, tzinfo=timezone.utc),
    )
