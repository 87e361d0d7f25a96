import pytest
from fastapi.testclient import TestClient

from app.config.dependencies import get_user_store
from app.main import app
from app.users.crud import InMemoryUserStore


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture
def store():
    """Freshly seeded store per test."""
    return InMemoryUserStore()


@pytest.fixture
def client(store):
    """TestClient wired to the per-test store."""
    app.dependency_overrides[get_user_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
