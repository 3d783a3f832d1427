"""
Status cache test configuration.

Fixtures build the cache against a temporary directory and a fake origin
served by httpx.MockTransport, so no test touches the network.

Key fixtures:
- origin_stub: the fake origin; add images, count requests, take it offline
- store: FileImageStore rooted in tmp_path
- coordinator: CacheCoordinator over store + fake origin
- client: FastAPI TestClient over the full app
"""

import sys
from pathlib import Path
from typing import Dict

import httpx
import pytest
from fastapi.testclient import TestClient

# Make the backend packages importable
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from status_cache.app import create_app
from status_cache.config import CacheServerConfig
from status_cache.coordinator import CacheCoordinator
from status_cache.origin import OriginClient
from status_cache.storage import FileImageStore

ORIGIN_URL = "https://origin.test"


# ============================================
# Fake Origin
# ============================================

class OriginStub:
    """
    In-memory origin.

    - images: key -> bytes served with 200
    - reachable: when False every request fails with a connection error
    - requests: keys requested so far, in order
    """

    def __init__(self):
        self.images: Dict[str, bytes] = {}
        self.reachable = True
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        key = request.url.path.lstrip("/")
        self.requests.append(key)
        if not self.reachable:
            raise httpx.ConnectError("origin unreachable", request=request)
        if key in self.images:
            return httpx.Response(200, content=self.images[key], headers={"Content-Type": "image/jpeg"})
        return httpx.Response(404, text="Not Found")

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


# ============================================
# Fixtures
# ============================================

@pytest.fixture
def origin_stub():
    return OriginStub()


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def store(cache_dir):
    return FileImageStore(cache_dir)


@pytest.fixture
def origin_client(origin_stub):
    return OriginClient(ORIGIN_URL, origin_stub.http_client())


@pytest.fixture
def coordinator(store, origin_client):
    return CacheCoordinator(store, origin_client)


@pytest.fixture
def config(cache_dir):
    return CacheServerConfig(
        host="127.0.0.1",
        port=3000,
        cache_dir=cache_dir,
        origin_base_url=ORIGIN_URL,
    )


@pytest.fixture
def client(config, origin_stub):
    """
    TestClient over the full app.

    Used as a context manager so the app lifespan runs and closes the
    origin client afterwards.
    """
    app = create_app(config, http_client=origin_stub.http_client())
    with TestClient(app) as test_client:
        yield test_client
