from datetime import UTC, datetime

import pytest

# Monday 2024-01-15 at noon UTC
FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import app
    from app.routes.dependencies import get_now

    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
