"""
OriginClient tests.

The origin is an httpx.MockTransport; see conftest.OriginStub.
"""

import httpx
import pytest

from status_cache.origin import OriginClient


class TestOriginFetch:
    """Fetching from the origin"""

    def test_url_for_strips_trailing_slash(self, origin_stub):
        client = OriginClient("https://origin.test/", origin_stub.http_client())

        assert client.url_for("418") == "https://origin.test/418"

    @pytest.mark.asyncio
    async def test_success_returns_bytes(self, origin_client, origin_stub):
        origin_stub.images["418"] = b"teapot"

        assert await origin_client.fetch("418") == b"teapot"
        assert origin_stub.requests == ["418"]

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, origin_client):
        assert await origin_client.fetch("999") is None

    @pytest.mark.asyncio
    async def test_unreachable_returns_none(self, origin_client, origin_stub):
        origin_stub.images["200"] = b"ok"
        origin_stub.reachable = False

        assert await origin_client.fetch("200") is None

    @pytest.mark.asyncio
    async def test_server_error_returns_none(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        client = OriginClient("https://origin.test", httpx.AsyncClient(transport=transport))

        assert await client.fetch("200") is None

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        client = OriginClient("https://origin.test", httpx.AsyncClient(transport=httpx.MockTransport(handler)))

        assert await client.fetch("200") is None
