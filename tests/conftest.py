import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


@pytest.fixture
def client():
    settings = Settings(DATABASE_URL="sqlite://", SECRET_KEY="test-secret", LOG_LEVEL="WARNING")
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def register(client, email="driver@example.com", username="driver", password="s3cret-pass"):
    resp = client.post("/api/register", json={"username": username, "email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return register(client)


def load_payload(pro_number="PRO-1001", **overrides):
    payload = {
        "proNumber": pro_number,
        "dateDispatched": "2026-10-01T08:00:00",
        "originCity": "Des Moines",
        "originState": "IA",
        "destinationCity": "Denver",
        "destinationState": "CO",
        "deadheadMiles": 40,
        "loadedMiles": 675,
        "weight": 42000,
        "driverPayType": "percentage",
        "linehaul": 2100.0,
        "fsc": 310.5,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def active_load(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(), headers=auth_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
