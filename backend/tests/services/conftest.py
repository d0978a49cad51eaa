"""Service test fixtures — FastAPI test client over a fresh registry.

Invariants:
    - Every test gets its own CalculatorRegistry (no state leaks between tests)
    - get_registry dependency overridden; dependency_overrides cleared afterwards
"""

import pytest
from httpx import ASGITransport, AsyncClient

from calculator.main import app
from calculator.services.calculator_registry import CalculatorRegistry, get_registry


@pytest.fixture
def test_registry():
    return CalculatorRegistry(max_sessions=5)


@pytest.fixture
async def client(test_registry):
    """FastAPI test client with the registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: test_registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def calculator_id(client):
    """Id of a freshly created calculator with default settings."""
    res = await client.post("/api/v1/calculators")
    return res.json()["id"]


@pytest.fixture
def press(client, calculator_id):
    """Press a sequence of keys; returns the last snapshot."""
    async def _press(*keys):
        body = None
        for key in keys:
            res = await client.post(
                f"/api/v1/calculators/{calculator_id}/keys", json={"key": key},
            )
            assert res.status_code == 200, res.text
            body = res.json()
        return body
    return _press
