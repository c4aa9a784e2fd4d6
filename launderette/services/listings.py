"""Listing persistence on top of the document store."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from launderette.db.store import DocumentSnapshot, RecordStore, now_ms
from launderette.schemas.listing import Listing, ListingCreate

logger = logging.getLogger(__name__)

COLLECTION = "launderettes"


def to_listing(snapshot: DocumentSnapshot) -> Listing:
    return Listing.model_validate(snapshot.to_dict())


def list_listings(store: RecordStore) -> list[Listing]:
    """All listings; documents that fail validation are logged and skipped."""
    listings = []
    for snapshot in store.collection(COLLECTION).get():
        try:
            listings.append(to_listing(snapshot))
        except ValidationError as exc:
            logger.warning("Skipping malformed listing %s: %s", snapshot.id, exc.errors())
    return listings


def get_listing(store: RecordStore, listing_id: str) -> Listing | None:
    """The listing, or None when it is missing or fails validation."""
    snapshot = store.collection(COLLECTION).doc(listing_id).get()
    if not snapshot.exists:
        return None
    try:
        return to_listing(snapshot)
    except ValidationError as exc:
        logger.warning("Malformed listing %s: %s", listing_id, exc.errors())
        return None


def create_listing(store: RecordStore, payload: ListingCreate, uid: str | None = None) -> Listing:
    data = payload.to_document()
    data["createdAt"] = now_ms()
    if uid:
        data["createdBy"] = uid
    ref = store.collection(COLLECTION).add(data)
    logger.info("Created listing %s (%s)", ref.id, payload.name)
    return to_listing(ref.get())


def update_listing(
    store: RecordStore, listing_id: str, payload: ListingCreate, uid: str | None = None
) -> Listing | None:
    ref = store.collection(COLLECTION).doc(listing_id)
    if not ref.get().exists:
        return None
    changes = payload.to_document()
    changes["updatedAt"] = now_ms()
    if uid:
        changes["updatedBy"] = uid
    ref.update(changes)
    logger.info("Updated listing %s", listing_id)
    return to_listing(ref.get())


def delete_listing(store: RecordStore, listing_id: str) -> bool:
    ref = store.collection(COLLECTION).doc(listing_id)
    if not ref.get().exists:
        return False
    ref.delete()
    logger.info("Deleted listing %s", listing_id)
    return True
