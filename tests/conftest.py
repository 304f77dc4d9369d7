import pytest

from tools.mcp_server import create_server


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeCatalog:
    """Stands in for CatalogClient: records paths, returns a canned envelope."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def fetch_json(self, path):
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_server():
    """Build a server around a FakeCatalog; returns (server, catalog)."""

    def _make(response=None, error=None):
        catalog = FakeCatalog(response=response, error=error)
        return create_server(catalog), catalog

    return _make
