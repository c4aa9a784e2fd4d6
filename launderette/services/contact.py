"""Contact form submissions (write-only from the API)."""

from __future__ import annotations

import logging

from launderette.db.store import RecordStore, now_ms
from launderette.schemas.contact import ContactSubmission, ContactSubmissionCreate

logger = logging.getLogger(__name__)

COLLECTION = "contactSubmissions"


def submit_contact(store: RecordStore, payload: ContactSubmissionCreate) -> ContactSubmission:
    data = payload.to_document()
    data["status"] = "new"
    data["createdAt"] = now_ms()
    ref = store.collection(COLLECTION).add(data)
    logger.info("Contact submission %s: %s", ref.id, payload.subject)
    return ContactSubmission.model_validate(ref.get().to_dict())
