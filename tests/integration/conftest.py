"""
Integration Test Fixtures.

An httpx client wired to a fresh app whose database dependency is the
per-test session from the root conftest.py, plus envelope assertions.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient, Response
from sqlalchemy.ext.asyncio import AsyncSession

from notebox.backend.core.database import get_db_session
from notebox.backend.main import create_app


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Client for the ASGI app, sharing ``db_session`` with the test.

    Rows seeded by ``tenants`` are visible to the endpoint, and notes the
    endpoint creates are visible to the test.
    """
    async def _session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app = create_app()
    app.dependency_overrides[get_db_session] = _session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


def _expect_status(response: Response, status: int) -> dict[str, Any]:
    assert response.status_code == status, (
        f"expected {status}, got {response.status_code}: {response.text}"
    )
    return response.json()


class ApiAssertions:
    """Checks on the ``{success, data, error, metadata}`` envelope."""

    @staticmethod
    def assert_success(response: Response, expected_status: int = 200) -> dict[str, Any]:
        data = _expect_status(response, expected_status)
        assert data["success"] is True, data
        assert data["error"] is None, data
        return data

    @staticmethod
    def assert_error(
        response: Response,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        data = _expect_status(response, expected_status)
        assert data["success"] is False, data
        assert data["data"] is None, data
        assert data["error"] is not None, data
        if expected_code:
            assert data["error"]["code"] == expected_code, data["error"]
        return data

    @staticmethod
    def assert_validation_error(response: Response, field: str | None = None) -> dict[str, Any]:
        """400 VALIDATION_ERROR; with ``field``, one entry must name it."""
        data = ApiAssertions.assert_error(response, 400, "VALIDATION_ERROR")
        if field:
            fields = [e["field"] for e in data["error"]["details"]["validation_errors"]]
            assert any(field in f for f in fields), f"no error for {field!r} in {fields}"
        return data

    @staticmethod
    def assert_business_rule_error(response: Response, kind: str, message: str) -> dict[str, Any]:
        """400 BUSINESS_RULE_ERROR with the given failure kind and reason."""
        data = ApiAssertions.assert_error(response, 400, "BUSINESS_RULE_ERROR")
        assert data["error"]["message"] == message
        assert data["error"]["details"]["kind"] == kind
        return data


@pytest.fixture
def api() -> ApiAssertions:
    return ApiAssertions()
