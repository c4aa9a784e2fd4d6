"""City FAQ endpoints."""

from fastapi import APIRouter, Depends

from launderette.api.deps import get_store, require_admin
from launderette.core.errors import NotFoundError
from launderette.core.security import AuthUser
from launderette.db.store import RecordStore
from launderette.schemas.faq import CityFaq, CityFaqUpsert
from launderette.services import faqs as faq_service

router = APIRouter(prefix="/faqs", tags=["faqs"])


@router.get("/{city_name}", response_model=CityFaq)
def get_city_faq(city_name: str, store: RecordStore = Depends(get_store)) -> CityFaq:
    faq = faq_service.get_faq(store, city_name)
    if faq is None:
        raise NotFoundError("FAQ")
    return faq


@router.put("/{city_name}", response_model=CityFaq)
def put_city_faq(
    city_name: str,
    payload: CityFaqUpsert,
    store: RecordStore = Depends(get_store),
    user: AuthUser = Depends(require_admin),
) -> CityFaq:
    return faq_service.upsert_faq(store, city_name, payload.questions)
