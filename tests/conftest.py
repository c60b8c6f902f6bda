# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from opticore_api.app.core.config import Settings
from opticore_api.app.main import create_app


@pytest.fixture
def settings():
    """Settings with static file serving disabled."""
    return Settings(static_dir="")


@pytest.fixture
def app(settings):
    """A fresh application with empty stores."""
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def subscribe(client):
    """Create a subscription through the API and return its id."""

    def _subscribe(name="Acme", plan="PRO"):
        resp = client.post("/api/subscribe", json={"name": name, "plan": plan})
        assert resp.status_code == 200, resp.text
        return resp.json()["clientId"]

    return _subscribe


@pytest.fixture
def login(client):
    """Log in through the API and return ready-to-use auth headers."""

    def _login(role="client", client_id=None, email="owner@example.com"):
        body = {"email": email, "role": role}
        if client_id is not None:
            body["clientId"] = client_id
        resp = client.post("/api/login", json=body)
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _login


@pytest.fixture
def admin_headers(login):
    return login(role="admin", email="admin@example.com")
