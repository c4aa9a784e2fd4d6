"""Reviews and average ratings."""

from __future__ import annotations

from launderette.db.store import RecordStore, now_ms
from launderette.schemas.review import RatingSummary, Review, ReviewCreate

COLLECTION = "reviews"
MAX_REVIEWS = 50


def list_reviews(store: RecordStore, listing_id: str, limit: int = MAX_REVIEWS) -> list[Review]:
    """Newest reviews first."""
    snapshots = (
        store.collection(COLLECTION)
        .where("launderetteId", "==", listing_id)
        .order_by("createdAt", "desc")
        .limit(limit)
        .get()
    )
    return [Review.model_validate(s.to_dict()) for s in snapshots]


def add_review(store: RecordStore, listing_id: str, payload: ReviewCreate) -> Review:
    # No check that the listing exists.
    data = payload.to_document()
    data["launderetteId"] = listing_id
    data["createdAt"] = now_ms()
    ref = store.collection(COLLECTION).add(data)
    return Review.model_validate(ref.get().to_dict())


def delete_review(store: RecordStore, review_id: str) -> bool:
    ref = store.collection(COLLECTION).doc(review_id)
    if not ref.get().exists:
        return False
    ref.delete()
    return True


def average_rating(store: RecordStore, listing_id: str) -> RatingSummary:
    snapshots = store.collection(COLLECTION).where("launderetteId", "==", listing_id).get()
    ratings = [s.data["rating"] for s in snapshots if isinstance(s.data.get("rating"), (int, float))]
    if not ratings:
        return RatingSummary(average=0, count=0)
    return RatingSummary(average=round(sum(ratings) / len(ratings), 1), count=len(ratings))
