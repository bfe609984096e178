"""Tests for the application factory and the shared error handlers."""
from disaster_dashboard import create_app


def test_health_endpoint(client) -> None:
    """Ensure the health check returns the expected response."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_unexpected_errors_are_opaque() -> None:
    """A crashing handler must not leak the exception text to the client."""
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"})

    @app.route("/api/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with app.test_client() as client:
        response = client.get("/api/boom")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}
    assert b"hunter2" not in response.data


def test_unknown_route_returns_json_404(client) -> None:
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert "error" in response.get_json()


def test_malformed_json_body_is_rejected(client) -> None:
    response = client.post("/api/alerts", data="{not json", content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_non_object_json_body_is_rejected(client) -> None:
    response = client.post("/api/alerts", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_REQUEST_BODY"


def test_cors_headers_on_api_routes(client) -> None:
    response = client.get("/api/health", headers={"Origin": "http://dashboard.example"})
    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "http://dashboard.example")
