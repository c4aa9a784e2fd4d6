"""Public contact form."""

from fastapi import APIRouter, Depends

from launderette.api.deps import get_store
from launderette.db.store import RecordStore
from launderette.schemas.contact import ContactSubmissionCreate
from launderette.services import contact as contact_service

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("")
def submit_contact(
    payload: ContactSubmissionCreate, store: RecordStore = Depends(get_store)
) -> dict[str, bool]:
    contact_service.submit_contact(store, payload)
    return {"success": True}
