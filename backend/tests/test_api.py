"""HTTP surface — health, profile identity, alert checks."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from capprofile.main import app
from capprofile.models.alert import MsgType
from capprofile.models.responses import HealthResponse
from tests.builders import compliant_alert, compliant_info


def _payload(alert):
    return alert.model_dump(mode="json", by_alias=True)


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/api/v1/health"


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["profile"] == "google"


def test_profile(client):
    response = client.get("/api/v1/profile")

    assert response.status_code == 200
    assert response.json() == {
        "name": "Google Public Alerts CAP v1.0",
        "code": "google",
        "documentation_url": "http://goo.gl/jgHTe",
        "strict_xsd_validation": False,
    }


def test_check_compliant_alert(client):
    response = client.post("/api/v1/check", json=_payload(compliant_alert()))

    assert response.status_code == 200
    body = response.json()
    assert body["passed"] is True
    assert body["errors"] == []


def test_check_reports_findings(client):
    alert = compliant_alert(msg_type=MsgType.UPDATE, info=[compliant_info(contact=None)])

    response = client.post("/api/v1/check", json=_payload(alert))

    assert response.status_code == 200
    body = response.json()
    assert body["passed"] is False
    assert [(f["location"], f["code"]) for f in body["errors"]] == [
        ("/alert/msgType", "UPDATE_OR_CANCEL_MUST_REFERENCE"),
    ]
    assert [(f["location"], f["code"]) for f in body["recommendations"]] == [
        ("/alert/info[0]", "CONTACT_IS_RECOMMENDED"),
    ]


def test_check_accepts_cap_element_names(client):
    payload = {
        "sent": "2024-05-01T09:00:00-05:00",
        "msgType": "Alert",
        "info": [],
    }

    response = client.post("/api/v1/check", json=payload)

    assert response.status_code == 200
    assert [f["code"] for f in response.json()["errors"]] == ["INFO_IS_REQUIRED"]


def test_check_rejects_unparseable_timestamp(client):
    alert = compliant_alert(info=[compliant_info(expires="not-a-date")])

    response = client.post("/api/v1/check", json=_payload(alert))

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"


def test_check_rejects_malformed_body(client):
    response = client.post("/api/v1/check", json={"msgType": "Alert"})

    assert response.status_code == 422


def test_cors_allows_any_origin_without_credentials(client):
    response = client.get("/", headers={"Origin": "https://alerts.example.org"})

    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers


def test_health_response_only_reports_healthy():
    with pytest.raises(ValidationError):
        HealthResponse(status="degraded", version="1.0.0", uptime_seconds=0.0, profile="google")
