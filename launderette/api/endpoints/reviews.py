"""Review endpoints."""

from fastapi import APIRouter, Depends, Response, status

from launderette.api.deps import get_store, require_admin
from launderette.core.errors import NotFoundError
from launderette.core.security import AuthUser
from launderette.db.store import RecordStore
from launderette.schemas.review import RatingSummary, Review, ReviewCreate
from launderette.services import reviews as review_service

router = APIRouter(tags=["reviews"])


@router.get("/launderettes/{listing_id}/reviews", response_model=list[Review])
def list_reviews(listing_id: str, store: RecordStore = Depends(get_store)) -> list[Review]:
    """Latest 50 reviews, newest first."""
    return review_service.list_reviews(store, listing_id)


@router.post(
    "/launderettes/{listing_id}/reviews",
    response_model=Review,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    listing_id: str, payload: ReviewCreate, store: RecordStore = Depends(get_store)
) -> Review:
    return review_service.add_review(store, listing_id, payload)


@router.get("/launderettes/{listing_id}/rating", response_model=RatingSummary)
def get_rating(listing_id: str, store: RecordStore = Depends(get_store)) -> RatingSummary:
    return review_service.average_rating(store, listing_id)


@router.delete("/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: str,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Response:
    if not review_service.delete_review(store, review_id):
        raise NotFoundError("Review")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
