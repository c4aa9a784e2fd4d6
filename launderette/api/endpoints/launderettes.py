"""Launderette listing endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from launderette.api.deps import get_store, require_admin
from launderette.core.errors import NotFoundError
from launderette.core.security import AuthUser
from launderette.db.store import RecordStore
from launderette.schemas.listing import Listing, ListingCreate, ListingOut, PriceRange
from launderette.services import listings as listing_service
from launderette.services.search import filter_by_city, rank_listings

router = APIRouter(prefix="/launderettes", tags=["launderettes"])


@router.get("", response_model=list[Listing])
def list_launderettes(store: RecordStore = Depends(get_store)) -> list[Listing]:
    """Return every listing."""
    return listing_service.list_listings(store)


@router.get("/search", response_model=list[ListingOut])
def search_launderettes(
    request: Request,
    features: Optional[str] = Query(None, description="Comma-separated feature tags (all must match)"),
    price_range: Optional[PriceRange] = Query(None, alias="priceRange"),
    open_now: bool = Query(False, alias="openNow"),
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    city: Optional[str] = None,
    store: RecordStore = Depends(get_store),
) -> list[ListingOut]:
    """Filter and rank listings: premium first, then nearest first."""
    listings = listing_service.list_listings(store)
    if city:
        listings = filter_by_city(listings, city)

    selected = [f.strip() for f in (features or "").split(",") if f.strip()]
    origin = (lat, lng) if lat is not None and lng is not None else None

    ranked = rank_listings(
        listings,
        selected_features=selected,
        price_range=price_range,
        open_now=open_now,
        origin=origin,
        timezone=request.app.state.settings.timezone,
    )
    return [
        ListingOut(**item.listing.model_dump(), distance=item.distance) for item in ranked
    ]


@router.get("/{listing_id}", response_model=Listing)
def get_launderette(listing_id: str, store: RecordStore = Depends(get_store)) -> Listing:
    listing = listing_service.get_listing(store, listing_id)
    if listing is None:
        raise NotFoundError("Launderette")
    return listing


@router.post("", response_model=Listing, status_code=status.HTTP_201_CREATED)
def create_launderette(
    payload: ListingCreate,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Listing:
    return listing_service.create_listing(store, payload, uid=user.uid)


@router.put("/{listing_id}", response_model=Listing)
def update_launderette(
    listing_id: str,
    payload: ListingCreate,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Listing:
    listing = listing_service.update_listing(store, listing_id, payload, uid=user.uid)
    if listing is None:
        raise NotFoundError("Launderette")
    return listing


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_launderette(
    listing_id: str,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> Response:
    if not listing_service.delete_listing(store, listing_id):
        raise NotFoundError("Launderette")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
