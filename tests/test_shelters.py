"""Tests for the shelter endpoints."""

NEW_SHELTER = {
    "name": "Riverside Evacuation Hub",
    "address": "789 River Road, Riverside",
    "latitude": 40.7505,
    "longitude": -74.0134,
    "capacity": 600,
    "available": 450,
    "amenities": ["Food", "Medical", "Pet Friendly"],
    "contact": "(555) 345-6789",
    "status": "open",
}


def test_create_shelter(client) -> None:
    response = client.post("/api/resources/shelters", json=NEW_SHELTER)
    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Shelter created successfully"
    shelter = body["data"]
    assert shelter["id"]
    assert shelter["amenities"] == ["Food", "Medical", "Pet Friendly"]
    assert shelter["distance"] is None


def test_create_shelter_wraps_single_amenity(client) -> None:
    response = client.post("/api/resources/shelters", json=dict(NEW_SHELTER, amenities="Food"))
    assert response.status_code == 201
    assert response.get_json()["data"]["amenities"] == ["Food"]


def test_create_shelter_missing_fields(client) -> None:
    payload = {key: value for key, value in NEW_SHELTER.items() if key != "capacity"}
    response = client.post("/api/resources/shelters", json=payload)
    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_REQUIRED_FIELDS"


def test_create_shelter_accepts_zero_values(client) -> None:
    response = client.post("/api/resources/shelters", json=dict(NEW_SHELTER, available=0, latitude=0))
    assert response.status_code == 201
    assert response.get_json()["data"]["available"] == 0


def test_create_shelter_range_checks(client) -> None:
    cases = [
        ({"latitude": 91}, "INVALID_LATITUDE"),
        ({"longitude": -180.5}, "INVALID_LONGITUDE"),
        ({"capacity": -1}, "INVALID_CAPACITY"),
        ({"capacity": "lots"}, "INVALID_CAPACITY"),
        ({"available": -3}, "INVALID_AVAILABLE"),
        ({"status": "full"}, "INVALID_STATUS"),
    ]
    for override, code in cases:
        response = client.post("/api/resources/shelters", json=dict(NEW_SHELTER, **override))
        assert response.status_code == 400, override
        assert response.get_json()["code"] == code


def test_status_error_reported_before_numeric_errors(client) -> None:
    response = client.post("/api/resources/shelters", json=dict(NEW_SHELTER, status="full", latitude=100))
    assert response.get_json()["code"] == "INVALID_STATUS"
    assert set(response.get_json()["fields"]) == {"status", "latitude"}


def test_update_shelter_allows_available_over_capacity(client, make_shelter) -> None:
    shelter = make_shelter(capacity=500)
    response = client.put(f"/api/resources/shelters?id={shelter.id}", json={"available": 999})
    assert response.status_code == 200
    body = response.get_json()
    assert body["available"] == 999
    assert body["capacity"] == 500


def test_update_shelter_range_check(client, make_shelter) -> None:
    shelter = make_shelter()
    response = client.put(f"/api/resources/shelters?id={shelter.id}", json={"latitude": 91})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_LATITUDE"


def test_update_missing_shelter(client) -> None:
    response = client.put("/api/resources/shelters?id=3", json={"available": 1})
    assert response.status_code == 404
    assert response.get_json() == {"error": "Shelter not found"}


def test_get_shelter_by_id(client, make_shelter) -> None:
    shelter = make_shelter()
    body = client.get(f"/api/resources/shelters?id={shelter.id}").get_json()
    assert body["name"] == "Central Community Shelter"
    assert body["latitude"] == 40.7589
    assert client.get("/api/resources/shelters?id=77").status_code == 404


def test_list_shelters_filters(client, make_shelter) -> None:
    make_shelter(name="North District Emergency Center", address="456 North Avenue", status="open")
    make_shelter(name="East Side Support Center", address="987 East Street", status="limited")
    make_shelter(name="Harbor Point", address="12 North Pier", status="closed")

    body = client.get("/api/resources/shelters?status=limited").get_json()
    assert [s["name"] for s in body["data"]["shelters"]] == ["East Side Support Center"]

    body = client.get("/api/resources/shelters?location=north").get_json()
    assert {s["name"] for s in body["data"]["shelters"]} == {"North District Emergency Center", "Harbor Point"}
    assert body["data"]["total"] == 2


def test_shelters_have_no_delete(client, make_shelter) -> None:
    shelter = make_shelter()
    assert client.delete(f"/api/resources/shelters?id={shelter.id}").status_code == 405


def test_create_shelter_rejects_numeric_strings(client) -> None:
    cases = [({"latitude": "45"}, "INVALID_LATITUDE"), ({"longitude": "-73.9"}, "INVALID_LONGITUDE")]
    for override, code in cases:
        response = client.post("/api/resources/shelters", json=dict(NEW_SHELTER, **override))
        assert response.status_code == 400, override
        assert response.get_json()["code"] == code


def test_update_shelter_rejects_null_numbers(client, make_shelter) -> None:
    shelter = make_shelter(capacity=500)
    response = client.put(f"/api/resources/shelters?id={shelter.id}", json={"capacity": None})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_CAPACITY"
    assert client.get(f"/api/resources/shelters?id={shelter.id}").get_json()["capacity"] == 500


def test_update_shelter_blank_optional_string_clears_it(client, make_shelter) -> None:
    shelter = make_shelter(distance="0.8 miles")
    response = client.put(f"/api/resources/shelters?id={shelter.id}", json={"distance": None})
    assert response.status_code == 200
    assert response.get_json()["distance"] is None
