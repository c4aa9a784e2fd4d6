from launderette.schemas.analytics import AnalyticsEvent
from launderette.services.analytics import summarize


def event(id, timestamp, type, **kwargs):
    return AnalyticsEvent.model_validate({"id": id, "timestamp": timestamp, "type": type, **kwargs})


def test_track_event_is_public(client):
    response = client.post("/api/analytics", json={"type": "search", "searchQuery": "leeds"})
    assert response.status_code == 201
    body = response.json()
    assert body["type"] == "search"
    assert isinstance(body["timestamp"], int)


def test_unknown_event_type_is_400(client):
    assert client.post("/api/analytics", json={"type": "click"}).status_code == 400


def test_reading_events_requires_admin(client, admin_headers):
    client.post("/api/analytics", json={"type": "view", "launderetteId": "L1"})
    assert client.get("/api/analytics").status_code == 401
    assert client.get("/api/analytics/summary").status_code == 401
    assert len(client.get("/api/analytics", headers=admin_headers).json()) == 1


def test_summary_counts():
    events = [
        event("e1", 1, "search", searchQuery="leeds"),
        event("e2", 2, "search", searchQuery="york"),
        event("e3", 3, "search", searchQuery="leeds"),
        event("e4", 4, "view", launderetteId="L1", launderetteName="Bubbles"),
        event("e5", 5, "view", launderetteId="L2", launderetteName="Suds"),
        event("e6", 6, "view", launderetteId="L1", launderetteName="Bubbles (renamed)"),
        event("e7", 7, "search"),
    ]
    summary = summarize(events)

    assert summary.total_events == 7
    assert summary.total_searches == 4
    assert summary.total_views == 3
    assert [(s.query, s.count) for s in summary.top_searches] == [("leeds", 2), ("york", 1)]
    assert [(v.launderette_id, v.name, v.count) for v in summary.top_viewed] == [
        ("L1", "Bubbles", 2),
        ("L2", "Suds", 1),
    ]
    assert [e.id for e in summary.recent_events] == ["e7", "e6", "e5", "e4", "e3", "e2", "e1"]


def test_summary_limits():
    events = [event(f"s{i}", i, "search", searchQuery=f"q{i}") for i in range(30)]
    summary = summarize(events)
    assert len(summary.top_searches) == 10
    assert len(summary.recent_events) == 20
    assert summary.recent_events[0].id == "s29"


def test_summary_endpoint(client, admin_headers, store):
    analytics = store.collection("analytics")
    analytics.doc("a").set({"type": "search", "searchQuery": "bath", "timestamp": 10})
    analytics.doc("b").set({"type": "view", "launderetteId": "L9", "timestamp": 20})

    body = client.get("/api/analytics/summary", headers=admin_headers).json()
    assert body["totalEvents"] == 2
    assert body["topSearches"] == [{"query": "bath", "count": 1}]
    assert body["topViewed"] == [{"launderetteId": "L9", "name": "", "count": 1}]
    assert [e["id"] for e in body["recentEvents"]] == ["b", "a"]
