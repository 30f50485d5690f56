import pytest
from fastapi.testclient import TestClient

from latency_server.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def anyio_backend():
    return "asyncio"
