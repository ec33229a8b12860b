"""Tests for the upstream prober."""

import asyncio

import httpx
import pytest

from apirelay.models import Route
from apirelay.routes import ROUTES
from apirelay.services.prober import probe_upstream, probe_upstreams


def _routes(count: int):
    return [
        Route(prefix=f"/svc{i}", upstream_base=f"https://svc{i}.example")
        for i in range(count)
    ]


@pytest.mark.asyncio
class TestProbeUpstream:
    """Tests for a single probe."""

    async def test_success_records_status_and_latency(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "HEAD"
            return httpx.Response(200)

        route = Route(prefix="/svc", upstream_base="https://svc.example")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await probe_upstream(client, route, timeout=5.0)

        assert result.name == "svc"
        assert result.target == "https://svc.example"
        assert result.ok is True
        assert result.status == 200
        assert isinstance(result.latency_ms, int)
        assert result.latency_ms >= 0

    async def test_client_error_still_counts_as_reachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        route = Route(prefix="/svc", upstream_base="https://svc.example")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await probe_upstream(client, route, timeout=5.0)

        assert result.ok is True
        assert result.status == 404

    async def test_server_error_is_not_ok(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502)

        route = Route(prefix="/svc", upstream_base="https://svc.example")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await probe_upstream(client, route, timeout=5.0)

        assert result.ok is False
        assert result.status == 502
        assert result.latency_ms is not None

    async def test_connection_error_yields_nulls(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        route = Route(prefix="/svc", upstream_base="https://svc.example")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await probe_upstream(client, route, timeout=5.0)

        assert result.model_dump() == {
            "name": "svc",
            "target": "https://svc.example",
            "ok": False,
            "latency_ms": None,
            "status": None,
        }

    async def test_timeout_yields_nulls(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200)

        route = Route(prefix="/svc", upstream_base="https://svc.example")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await probe_upstream(client, route, timeout=0.05)

        assert result.ok is False
        assert result.latency_ms is None
        assert result.status is None


@pytest.mark.asyncio
class TestProbeUpstreams:
    """Tests for the concurrent fan-out."""

    async def test_results_follow_route_order_not_completion_order(self):
        routes = _routes(5)
        delays = {f"svc{i}.example": 0.05 * (5 - i) for i in range(5)}
        completed = []

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(delays[request.url.host])
            completed.append(request.url.host)
            return httpx.Response(200)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            results = await probe_upstreams(client, routes, timeout=5.0)

        assert [r.name for r in results] == [f"svc{i}" for i in range(5)]
        assert completed == [f"svc{i}.example" for i in reversed(range(5))]

    async def test_probes_run_concurrently(self):
        routes = _routes(10)

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0.2)
            return httpx.Response(204)

        loop = asyncio.get_running_loop()
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            started = loop.time()
            results = await probe_upstreams(client, routes, timeout=5.0)
            elapsed = loop.time() - started

        assert all(r.ok for r in results)
        assert elapsed < 1.0

    async def test_failures_are_isolated(self):
        routes = _routes(4)

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "svc1.example":
                raise httpx.ConnectError("refused", request=request)
            if request.url.host == "svc2.example":
                return httpx.Response(500)
            return httpx.Response(200)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            results = await probe_upstreams(client, routes, timeout=5.0)

        assert [r.ok for r in results] == [True, False, False, True]
        assert [r.status for r in results] == [200, None, 500, 200]

    async def test_defaults_to_full_route_table(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            results = await probe_upstreams(client, timeout=5.0)

        assert len(results) == len(ROUTES)
        assert [r.name for r in results] == [route.prefix[1:] for route in ROUTES]
        assert [r.target for r in results] == [route.upstream_base for route in ROUTES]
