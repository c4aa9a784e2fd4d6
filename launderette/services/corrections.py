"""Correction submission and moderation.

Approving a correction is two separate writes: the correction's status
first, then the proposed value onto the listing. They are not wrapped in
a transaction, so a failure in between leaves an approved correction
whose value was never applied.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from launderette.core.errors import BadRequestError, ConflictError, NotFoundError
from launderette.db.store import RecordStore, now_ms
from launderette.schemas.correction import Correction, CorrectionCreate, CorrectionStatus
from launderette.schemas.listing import Listing, ListingCreate
from launderette.services import listings as listing_service

logger = logging.getLogger(__name__)

COLLECTION = "corrections"

EDITABLE_FIELDS = frozenset({"name", "address", "phone", "email", "website"})


def submit_correction(store: RecordStore, payload: CorrectionCreate) -> Correction:
    data = payload.to_document()
    data["status"] = "pending"
    data["createdAt"] = now_ms()
    ref = store.collection(COLLECTION).add(data)
    logger.info(
        "Correction %s submitted for %s.%s", ref.id, payload.launderette_id, payload.field_name
    )
    return Correction.model_validate(ref.get().to_dict())


def list_corrections(store: RecordStore, status: CorrectionStatus | None = None) -> list[Correction]:
    query = store.collection(COLLECTION)
    if status:
        query = query.where("status", "==", status)
    return [Correction.model_validate(s.to_dict()) for s in query.order_by("createdAt", "desc").get()]


def get_correction(store: RecordStore, correction_id: str) -> Correction:
    snapshot = store.collection(COLLECTION).doc(correction_id).get()
    if not snapshot.exists:
        raise NotFoundError("Correction")
    return Correction.model_validate(snapshot.to_dict())


def _resolve(
    store: RecordStore, correction_id: str, status: CorrectionStatus, reviewer: str
) -> Correction:
    correction = get_correction(store, correction_id)
    if correction.status != "pending":
        raise ConflictError(f"Correction already {correction.status}")
    store.collection(COLLECTION).doc(correction_id).update(
        {"status": status, "reviewedAt": now_ms(), "reviewedBy": reviewer}
    )
    return get_correction(store, correction_id)


def _check_applicable(listing: Listing, field_name: str, proposed_value: str) -> None:
    """Reject a value the listing schema would not accept once applied."""
    merged = listing.model_dump(by_alias=True)
    merged[to_camel(field_name)] = proposed_value
    try:
        ListingCreate.model_validate(merged)
    except ValidationError as exc:
        logger.info("Rejected value for %s.%s: %s", listing.id, field_name, exc.errors())
        raise BadRequestError(f"Proposed value is not a valid {field_name}") from exc


def approve_correction(store: RecordStore, correction_id: str, reviewer: str) -> Correction:
    """Mark approved, then copy the proposed value onto the listing."""
    pending = get_correction(store, correction_id)
    if pending.status == "pending":
        listing = listing_service.get_listing(store, pending.launderette_id)
        if listing is None:
            raise NotFoundError("Launderette")
        if pending.field_name in EDITABLE_FIELDS:
            _check_applicable(listing, pending.field_name, pending.proposed_value)

    correction = _resolve(store, correction_id, "approved", reviewer)

    if correction.field_name in EDITABLE_FIELDS:
        store.collection(listing_service.COLLECTION).doc(correction.launderette_id).update(
            {
                correction.field_name: correction.proposed_value,
                "updatedAt": now_ms(),
                "updatedBy": reviewer,
            }
        )
        logger.info(
            "Applied correction %s: %s.%s",
            correction_id,
            correction.launderette_id,
            correction.field_name,
        )
    else:
        logger.warning(
            "Correction %s approved but field %r is not editable; listing unchanged",
            correction_id,
            correction.field_name,
        )
    return correction


def reject_correction(store: RecordStore, correction_id: str, reviewer: str) -> Correction:
    return _resolve(store, correction_id, "rejected", reviewer)
