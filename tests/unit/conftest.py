"""
Unit Test Fixtures.

Mocks only: nothing here opens a database or a socket.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Request


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """AsyncSession stand-in; ``add`` is synchronous like the real one."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_db_result() -> MagicMock:
    """Result of ``session.execute``; set ``scalar_one_or_none`` / ``scalar_one`` per test."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    result.scalar_one.return_value = 0
    return result


@pytest.fixture
def mock_request() -> MagicMock:
    """POST /api/v1/internal/note carrying X-Request-ID test-123 and no request.state id."""
    request = MagicMock(spec=Request)
    request.url.path = "/api/v1/internal/note"
    request.method = "POST"
    request.headers = {"x-request-id": "test-123"}
    del request.state.request_id
    return request


@pytest.fixture
def mock_logger() -> MagicMock:
    """Patch over a module's ``logger`` to assert on level and ``extra``."""
    return MagicMock()
