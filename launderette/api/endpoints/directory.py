"""City/feature browsing and the geocoding proxy."""

from typing import Optional

from fastapi import APIRouter, Depends

from launderette.api.deps import get_geocoder, get_store
from launderette.core.errors import BadRequestError, NotFoundError
from launderette.db.store import RecordStore
from launderette.schemas.geocode import GeocodingResult
from launderette.schemas.listing import CityCount
from launderette.services import listings as listing_service
from launderette.services.geocoding import Geocoder
from launderette.services.search import available_features, city_counts

router = APIRouter(tags=["directory"])


@router.get("/cities", response_model=list[CityCount])
def list_cities(store: RecordStore = Depends(get_store)) -> list[CityCount]:
    return city_counts(listing_service.list_listings(store))


@router.get("/features", response_model=list[str])
def list_features(store: RecordStore = Depends(get_store)) -> list[str]:
    return available_features(listing_service.list_listings(store))


@router.get("/geocode", response_model=GeocodingResult)
async def geocode(
    address: Optional[str] = None, geocoder: Geocoder = Depends(get_geocoder)
) -> GeocodingResult:
    """Resolve a free-text address with the upstream geocoder."""
    if not address or not address.strip():
        raise BadRequestError("Address parameter is required")
    result = await geocoder.geocode(address.strip())
    if result is None:
        raise NotFoundError("Location")
    return result
