"""Tests for the alert endpoints, including soft deletion."""
from disaster_dashboard import db
from disaster_dashboard.models import Alert

NEW_ALERT = {
    "type": "Flood Warning",
    "location": "Zone 1",
    "severity": "warning",
    "description": "Rising water",
}


def test_create_alert(client) -> None:
    """A valid alert is stored active with a generated id and timestamp."""
    response = client.post("/api/alerts", json=NEW_ALERT)
    assert response.status_code == 201
    body = response.get_json()
    assert body["success"] is True
    assert body["message"] == "Alert created successfully"
    alert = body["data"]
    for key, value in NEW_ALERT.items():
        assert alert[key] == value
    assert isinstance(alert["id"], int)
    assert alert["timestamp"]
    assert alert["isActive"] is True


def test_create_alert_trims_strings_and_ignores_is_active(client) -> None:
    payload = dict(NEW_ALERT, type="  Flood Warning  ", description=" <b>Rising</b> water ", isActive=False)
    alert = client.post("/api/alerts", json=payload).get_json()["data"]
    assert alert["type"] == "Flood Warning"
    assert alert["description"] == "Rising water"
    assert alert["isActive"] is True


def test_create_alert_missing_fields(client) -> None:
    response = client.post("/api/alerts", json={"type": "Flood Warning", "location": "  "})
    assert response.status_code == 400
    body = response.get_json()
    assert body["code"] == "MISSING_REQUIRED_FIELDS"
    assert body["error"] == "Type, location, severity, and description are required"


def test_create_alert_invalid_severity(client) -> None:
    response = client.post("/api/alerts", json=dict(NEW_ALERT, severity="apocalyptic"))
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_SEVERITY"


def test_get_alert_by_id(client, make_alert) -> None:
    alert = make_alert(type="Wildfire Alert")
    response = client.get(f"/api/alerts?id={alert.id}")
    assert response.status_code == 200
    assert response.get_json()["type"] == "Wildfire Alert"


def test_get_missing_alert_returns_404(client) -> None:
    response = client.get("/api/alerts?id=999")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Alert not found"}


def test_get_alert_with_invalid_id(client) -> None:
    response = client.get("/api/alerts?id=abc")
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_ID"


def test_list_alerts_filters_and_envelope(client, make_alert) -> None:
    make_alert(severity="critical", location="Coastal Region A")
    make_alert(severity="warning", location="River Valley B")
    make_alert(severity="critical", location="Forest Area C")

    body = client.get("/api/alerts?severity=critical").get_json()
    assert body["success"] is True
    assert body["data"]["total"] == 2
    assert {a["severity"] for a in body["data"]["alerts"]} == {"critical"}
    assert "lastUpdated" in body["data"]

    body = client.get("/api/alerts?location=valley").get_json()
    assert [a["location"] for a in body["data"]["alerts"]] == ["River Valley B"]


def test_list_alerts_newest_first(client) -> None:
    first = client.post("/api/alerts", json=dict(NEW_ALERT, type="First")).get_json()["data"]
    second = client.post("/api/alerts", json=dict(NEW_ALERT, type="Second")).get_json()["data"]
    alerts = client.get("/api/alerts").get_json()["data"]["alerts"]
    assert [a["id"] for a in alerts] == [second["id"], first["id"]]


def test_list_alerts_limit_is_capped(client, app) -> None:
    db.session.add_all(Alert(**NEW_ALERT) for _ in range(105))
    db.session.commit()
    body = client.get("/api/alerts?limit=500").get_json()
    assert len(body["data"]["alerts"]) == 100
    body = client.get("/api/alerts?limit=20&offset=100").get_json()
    assert len(body["data"]["alerts"]) == 5


def test_list_alerts_default_limit(client, app) -> None:
    db.session.add_all(Alert(**NEW_ALERT) for _ in range(15))
    db.session.commit()
    assert len(client.get("/api/alerts").get_json()["data"]["alerts"]) == 10


def test_list_alerts_invalid_pagination(client) -> None:
    for query in ("limit=ten", "offset=-1", "limit=-5"):
        response = client.get(f"/api/alerts?{query}")
        assert response.status_code == 400
        assert response.get_json()["code"] == "INVALID_PAGINATION"


def test_update_alert_partial(client, make_alert) -> None:
    alert = make_alert()
    response = client.put(f"/api/alerts?id={alert.id}", json={"severity": "critical"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["severity"] == "critical"
    assert body["type"] == "Flood Warning"


def test_update_alert_validates_fields(client, make_alert) -> None:
    alert = make_alert()
    response = client.put(f"/api/alerts?id={alert.id}", json={"severity": "nope"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_SEVERITY"
    assert client.get(f"/api/alerts?id={alert.id}").get_json()["severity"] == "warning"


def test_update_alert_requires_id(client) -> None:
    response = client.put("/api/alerts", json={"severity": "critical"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_ID"


def test_update_missing_alert(client) -> None:
    response = client.put("/api/alerts?id=42", json={"severity": "critical"})
    assert response.status_code == 404
    assert response.get_json() == {"error": "Alert not found"}


def test_delete_alert_is_soft(client, make_alert) -> None:
    """Deleting keeps the row; it only stops appearing in lists."""
    alert = make_alert()
    response = client.delete(f"/api/alerts?id={alert.id}")
    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "Alert deactivated successfully"
    assert body["data"]["isActive"] is False

    fetched = client.get(f"/api/alerts?id={alert.id}")
    assert fetched.status_code == 200
    assert fetched.get_json()["isActive"] is False
    assert client.get("/api/alerts").get_json()["data"]["alerts"] == []
    assert db.session.get(Alert, alert.id) is not None


def test_reactivate_alert(client, make_alert) -> None:
    alert = make_alert(is_active=False)
    response = client.put(f"/api/alerts?id={alert.id}", json={"isActive": True})
    assert response.get_json()["isActive"] is True
    assert len(client.get("/api/alerts").get_json()["data"]["alerts"]) == 1


def test_delete_missing_alert(client) -> None:
    assert client.delete("/api/alerts?id=5").status_code == 404
    assert client.delete("/api/alerts?id=x").get_json()["code"] == "INVALID_ID"
