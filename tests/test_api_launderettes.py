def create(client, admin_headers, payload):
    response = client.post("/api/launderettes", json=payload, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/api/health").json() == {"status": "ok"}


def test_create_requires_token(client, listing_payload):
    response = client.post("/api/launderettes", json=listing_payload)
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized - No token provided"}


def test_create_rejects_bad_token(client, listing_payload):
    response = client.post(
        "/api/launderettes", json=listing_payload, headers={"Authorization": "Bearer wrong"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized - Invalid or expired token"


def test_create_and_fetch(client, admin_headers, listing_payload):
    created = create(client, admin_headers, listing_payload)
    assert created["id"]
    assert created["createdBy"] == "admin-uid"
    assert isinstance(created["createdAt"], int)
    assert created["openingHours"]["sunday"] == "Closed"

    fetched = client.get(f"/api/launderettes/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Bubbles Launderette"

    listed = client.get("/api/launderettes").json()
    assert [item["id"] for item in listed] == [created["id"]]


def test_validation_errors_are_400(client, admin_headers, listing_payload):
    bad = dict(listing_payload, name="", email="not-an-email")
    del bad["lat"]
    response = client.post("/api/launderettes", json=bad, headers=admin_headers)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid data"
    fields = {err["loc"][1] for err in body["details"]}
    assert {"name", "email", "lat"} <= fields


def test_invalid_website_rejected(client, admin_headers, listing_payload):
    bad = dict(listing_payload, website="not a url")
    response = client.post("/api/launderettes", json=bad, headers=admin_headers)
    assert response.status_code == 400


def test_unknown_listing_is_404(client):
    response = client.get("/api/launderettes/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Launderette not found"}


def test_update(client, admin_headers, listing_payload):
    created = create(client, admin_headers, listing_payload)
    changed = dict(listing_payload, name="Bubbles & Suds", isPremium=True)
    response = client.put(
        f"/api/launderettes/{created['id']}", json=changed, headers=admin_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Bubbles & Suds"
    assert body["isPremium"] is True
    assert body["updatedBy"] == "admin-uid"
    assert body["createdAt"] == created["createdAt"]


def test_update_missing_is_404(client, admin_headers, listing_payload):
    response = client.put("/api/launderettes/missing", json=listing_payload, headers=admin_headers)
    assert response.status_code == 404


def test_delete(client, admin_headers, listing_payload):
    created = create(client, admin_headers, listing_payload)
    response = client.delete(f"/api/launderettes/{created['id']}", headers=admin_headers)
    assert response.status_code == 204
    assert client.get(f"/api/launderettes/{created['id']}").status_code == 404
    again = client.delete(f"/api/launderettes/{created['id']}", headers=admin_headers)
    assert again.status_code == 404


def test_delete_requires_token(client, admin_headers, listing_payload):
    created = create(client, admin_headers, listing_payload)
    assert client.delete(f"/api/launderettes/{created['id']}").status_code == 401


def test_search_ranks_premium_then_distance(client, admin_headers, listing_payload):
    near = create(client, admin_headers, dict(listing_payload, name="Near", lat=53.80, lng=-1.55))
    far = create(client, admin_headers, dict(listing_payload, name="Far", lat=53.95, lng=-1.08))
    star = create(
        client,
        admin_headers,
        dict(listing_payload, name="Star", lat=54.5, lng=-1.0, isPremium=True),
    )

    response = client.get("/api/launderettes/search", params={"lat": 53.80, "lng": -1.55})
    assert response.status_code == 200
    results = response.json()
    assert [r["id"] for r in results] == [star["id"], near["id"], far["id"]]
    assert results[1]["distance"] < results[2]["distance"]


def test_search_filters(client, admin_headers, listing_payload):
    wifi = create(client, admin_headers, dict(listing_payload, name="A", features=["Free WiFi"]))
    create(client, admin_headers, dict(listing_payload, name="B", features=["Service Wash"]))
    create(
        client,
        admin_headers,
        dict(listing_payload, name="C", features=["Free WiFi"], priceRange="premium", city="York"),
    )

    response = client.get(
        "/api/launderettes/search", params={"features": "Free WiFi", "priceRange": "budget"}
    )
    assert [r["id"] for r in response.json()] == [wifi["id"]]
    assert response.json()[0]["distance"] is None

    by_city = client.get("/api/launderettes/search", params={"city": "york"}).json()
    assert [r["name"] for r in by_city] == ["C"]


def test_search_open_now_excludes_closed_listings(client, admin_headers, listing_payload):
    always = dict(listing_payload, name="Always")
    del always["openingHours"]
    never = dict(listing_payload, name="Never", openingHours={day: "Closed" for day in (
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
    )})
    create(client, admin_headers, always)
    create(client, admin_headers, never)

    names = [r["name"] for r in client.get("/api/launderettes/search?openNow=true").json()]
    assert names == ["Always"]


def test_search_rejects_unknown_price_range(client):
    response = client.get("/api/launderettes/search", params={"priceRange": "free"})
    assert response.status_code == 400


def test_cities_and_features(client, admin_headers, listing_payload):
    create(client, admin_headers, listing_payload)
    create(client, admin_headers, dict(listing_payload, city="York", features=["Dry Cleaning"]))
    create(client, admin_headers, dict(listing_payload, city="York"))

    assert client.get("/api/cities").json() == [
        {"city": "Leeds", "count": 1},
        {"city": "York", "count": 2},
    ]
    assert client.get("/api/features").json() == ["Dry Cleaning", "Free WiFi", "Service Wash"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unhandled_errors_are_opaque_500(app, client, monkeypatch):
    def explode(store):
        raise RuntimeError("database on fire")

    monkeypatch.setattr("launderette.services.listings.list_listings", explode)
    response = client.get("/api/launderettes")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_malformed_stored_listing_is_404_not_500(client, store):
    store.collection("launderettes").doc("bad").set(
        {"name": "Broken", "address": "1 Road", "lat": 51.0, "lng": 0.0, "email": "nope"}
    )
    response = client.get("/api/launderettes/bad")
    assert response.status_code == 404
    assert client.get("/api/launderettes").json() == []


def test_search_feature_tokens_are_trimmed(client, admin_headers, listing_payload):
    both = create(client, admin_headers, listing_payload)
    create(client, admin_headers, dict(listing_payload, name="Wash only", features=["Service Wash"]))

    response = client.get(
        "/api/launderettes/search", params={"features": "Service Wash, Free WiFi ,"}
    )
    assert [r["id"] for r in response.json()] == [both["id"]]
