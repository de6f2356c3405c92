import pytest
from fastapi.testclient import TestClient

from nourishnet.main import create_app


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def _payload(**overrides) -> dict:
    payload = {
        "depot": [77.5946, 12.9716],
        "subscribers": [
            {"id": "S1", "name": "Asha", "address": "Indiranagar", "coordinates": [77.6408, 12.9784]},
            {"id": "S2", "name": "Ravi", "address": "Koramangala", "coordinates": [77.6245, 12.9352]},
            {"id": "S3", "name": "Meera", "address": "Unknown", "coordinates": None},
            {"id": "S4", "name": "Kiran", "address": "MG Road", "coordinates": [77.6066, 12.9756]},
        ],
    }
    payload.update(overrides)
    return payload


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}


def test_sequence_endpoint_returns_ordered_route(api_client: TestClient):
    response = api_client.post("/api/routes/sequence", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["stop_count"] == 3
    assert [step["order"] for step in body["steps"]] == [1, 2, 3]
    # MG Road is the closest subscriber to the kitchen
    assert body["steps"][0]["stop_id"] == "S4"
    assert body["metadata"]["skipped_stops"] == ["S3"]
    assert body["metadata"]["map_overlays"]["type"] == "FeatureCollection"


def test_sequence_endpoint_reports_unavailable_route(api_client: TestClient):
    payload = _payload(depot=[77.5946, 112.0])

    response = api_client.post("/api/routes/sequence", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "unavailable"
    assert [step["stop_id"] for step in body["steps"]] == ["S1", "S2", "S4"]


def test_sequence_endpoint_validates_request_body(api_client: TestClient):
    response = api_client.post("/api/routes/sequence", json=_payload(average_speed_kmh=0))

    assert response.status_code == 422


def test_export_endpoint_returns_csv(api_client: TestClient):
    response = api_client.post("/api/routes/sequence/export", json=_payload())

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0].startswith("order,stop_id")
    assert len(lines) == 4


def test_export_endpoint_rejects_bad_coordinates(api_client: TestClient):
    response = api_client.post("/api/routes/sequence/export", json=_payload(depot=[500.0, 0.0]))

    assert response.status_code == 400
    assert "depot.longitude" in response.json()["detail"]


def test_osrm_health_reports_unreachable_service(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from nourishnet.services.routing import osrm_client as osrm_module

    monkeypatch.setattr(osrm_module, "check_health", lambda base_url=None: False)

    body = api_client.get("/api/health/osrm").json()

    assert body["service"] == "osrm"
    assert body["healthy"] is False
