from unittest.mock import patch

from fastapi.testclient import TestClient

from src.shopkart.core.services import DbSessionService


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_with_database(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


def test_readiness_without_database(client: TestClient):
    with patch.object(DbSessionService, "health_check", return_value=False):
        response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_database_health_reports_pool(client: TestClient):
    response = client.get("/health/database")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert set(body["pool"]) == {"size", "checked_in", "checked_out", "overflow"}


def test_database_health_error(client: TestClient):
    with patch.object(
        DbSessionService, "get_pool_status", side_effect=RuntimeError("pool gone")
    ):
        response = client.get("/health/database")

    assert response.status_code == 503
    assert response.json()["error_type"] == "RuntimeError"
