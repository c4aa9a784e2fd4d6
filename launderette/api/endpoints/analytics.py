"""Analytics endpoints."""

from fastapi import APIRouter, Depends, status

from launderette.api.deps import get_store, require_admin
from launderette.core.security import AuthUser
from launderette.db.store import RecordStore
from launderette.schemas.analytics import AnalyticsEvent, AnalyticsEventCreate, AnalyticsSummary
from launderette.services import analytics as analytics_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("", response_model=AnalyticsEvent, status_code=status.HTTP_201_CREATED)
def track_event(
    payload: AnalyticsEventCreate, store: RecordStore = Depends(get_store)
) -> AnalyticsEvent:
    return analytics_service.record_event(store, payload)


@router.get("", response_model=list[AnalyticsEvent])
def list_events(
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> list[AnalyticsEvent]:
    return analytics_service.list_events(store)


@router.get("/summary", response_model=AnalyticsSummary)
def get_summary(
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> AnalyticsSummary:
    return analytics_service.summarize(analytics_service.list_events(store))
