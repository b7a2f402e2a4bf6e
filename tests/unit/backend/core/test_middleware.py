"""
Unit Tests for RequestContextMiddleware.

dispatch() is driven directly with a mocked Request and a stub
call_next; structlog's contextvars module is patched per test.
"""

from unittest.mock import MagicMock, patch

import pytest
from starlette.requests import Request
from starlette.responses import Response

from notebox.backend.core.middleware import RequestContextMiddleware, _source_of

CONTEXTVARS = "notebox.backend.core.middleware.structlog.contextvars"


def _request(**headers: str) -> MagicMock:
    request = MagicMock(spec=Request)
    request.headers = headers
    request.method = "POST"
    request.url.path = "/api/v1/internal/note"
    request.state = MagicMock()
    return request


async def _created(request) -> Response:
    return Response(content="{}", status_code=201)


async def _dispatch(request, call_next=_created):
    middleware = RequestContextMiddleware(MagicMock())
    with patch(CONTEXTVARS) as ctx:
        response = await middleware.dispatch(request, call_next)
    return response, ctx


class TestRequestId:
    @pytest.mark.asyncio
    async def test_caller_id_is_reused(self):
        seen = {}

        async def call_next(request):
            seen["state"] = request.state.request_id
            return await _created(request)

        response, _ = await _dispatch(_request(**{"X-Request-ID": "abc-123"}), call_next)

        assert seen["state"] == "abc-123"
        assert response.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_uuid_generated_when_absent(self):
        response, _ = await _dispatch(_request())

        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36
        assert request_id.count("-") == 4

    @pytest.mark.asyncio
    async def test_response_time_in_ms(self):
        response, _ = await _dispatch(_request())

        value = response.headers["X-Response-Time"]
        assert value.endswith("ms")
        assert int(value[:-2]) >= 0


class TestSource:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [("web", "web"), ("CLI", "cli"), ("internal", "internal"), ("custom-client", "unknown")],
    )
    def test_normalised(self, header, expected):
        assert _source_of(_request(**{"X-Frontend-ID": header})) == expected

    def test_defaults_to_unknown(self):
        assert _source_of(_request()) == "unknown"

    @pytest.mark.asyncio
    async def test_stored_on_request_state(self):
        request = _request(**{"X-Frontend-ID": "api"})

        await _dispatch(request)

        assert request.state.source == "api"


class TestLogContext:
    @pytest.mark.asyncio
    async def test_binds_request_fields(self):
        _, ctx = await _dispatch(_request(**{"X-Request-ID": "ctx-1", "X-Frontend-ID": "api"}))

        assert ctx.bind_contextvars.call_args.kwargs == {
            "request_id": "ctx-1",
            "source": "api",
            "method": "POST",
            "path": "/api/v1/internal/note",
        }

    @pytest.mark.asyncio
    async def test_cleared_on_entry_and_exit(self):
        _, ctx = await _dispatch(_request())

        assert ctx.clear_contextvars.call_count == 2

    @pytest.mark.asyncio
    async def test_downstream_error_propagates_and_clears(self):
        async def call_next(request):
            raise RuntimeError("downstream failure")

        middleware = RequestContextMiddleware(MagicMock())
        with patch(CONTEXTVARS) as ctx:
            with pytest.raises(RuntimeError, match="downstream failure"):
                await middleware.dispatch(_request(), call_next)

        assert ctx.clear_contextvars.call_count == 2
