"""Append-only analytics events and their aggregation."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from launderette.db.store import RecordStore, now_ms
from launderette.schemas.analytics import (
    AnalyticsEvent,
    AnalyticsEventCreate,
    AnalyticsSummary,
    SearchCount,
    ViewCount,
)

COLLECTION = "analytics"

TOP_N = 10
RECENT_N = 20


def record_event(store: RecordStore, payload: AnalyticsEventCreate) -> AnalyticsEvent:
    data = payload.to_document()
    data["timestamp"] = now_ms()
    ref = store.collection(COLLECTION).add(data)
    return AnalyticsEvent.model_validate(ref.get().to_dict())


def list_events(store: RecordStore) -> list[AnalyticsEvent]:
    snapshots = store.collection(COLLECTION).order_by("timestamp", "desc").get()
    return [AnalyticsEvent.model_validate(s.to_dict()) for s in snapshots]


def summarize(events: Iterable[AnalyticsEvent]) -> AnalyticsSummary:
    """Top searches, most viewed listings and the latest events."""
    events = list(events)
    searches = [e for e in events if e.type == "search"]
    views = [e for e in events if e.type == "view"]

    # Counter.most_common keeps first-seen order between equal counts.
    search_counts = Counter(e.search_query for e in searches if e.search_query)
    top_searches = [
        SearchCount(query=query, count=count) for query, count in search_counts.most_common(TOP_N)
    ]

    view_counts: Counter[str] = Counter()
    names: dict[str, str] = {}
    for e in views:
        if not e.launderette_id:
            continue
        view_counts[e.launderette_id] += 1
        names.setdefault(e.launderette_id, e.launderette_name or "")
    top_viewed = [
        ViewCount(launderette_id=lid, name=names[lid], count=count)
        for lid, count in view_counts.most_common(TOP_N)
    ]

    recent = sorted(events, key=lambda e: e.timestamp, reverse=True)[:RECENT_N]

    return AnalyticsSummary(
        total_events=len(events),
        total_searches=len(searches),
        total_views=len(views),
        top_searches=top_searches,
        top_viewed=top_viewed,
        recent_events=recent,
    )
