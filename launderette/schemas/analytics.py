"""Schemas for search/view analytics."""

from typing import Literal, Optional

from launderette.schemas.common import CamelModel

EventType = Literal["search", "view"]


class AnalyticsEventCreate(CamelModel):
    type: EventType
    search_query: Optional[str] = None
    launderette_id: Optional[str] = None
    launderette_name: Optional[str] = None
    user_lat: Optional[float] = None
    user_lng: Optional[float] = None


class AnalyticsEvent(AnalyticsEventCreate):
    id: str
    timestamp: int


class SearchCount(CamelModel):
    query: str
    count: int


class ViewCount(CamelModel):
    launderette_id: str
    name: str
    count: int


class AnalyticsSummary(CamelModel):
    total_events: int
    total_searches: int
    total_views: int
    top_searches: list[SearchCount]
    top_viewed: list[ViewCount]
    recent_events: list[AnalyticsEvent]
