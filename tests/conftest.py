import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    return url


@pytest.fixture
def client(db_url):
    # Use TestClient as a context manager so the store is opened and disposed
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(client):
    def _make(name="Apple", price=1.5):
        r = client.post("/products", json={"name": name, "price": price})
        assert r.status_code == 201, r.text
        return r.json()["product"]
    return _make
