"""Per-city FAQ documents (one per city, upserted)."""

from __future__ import annotations

from launderette.db.store import RecordStore, now_ms
from launderette.schemas.faq import CityFaq, FaqItem

COLLECTION = "faqs"


def get_faq(store: RecordStore, city_name: str) -> CityFaq | None:
    snapshots = store.collection(COLLECTION).where("cityName", "==", city_name).limit(1).get()
    if not snapshots:
        return None
    return CityFaq.model_validate(snapshots[0].to_dict())


def upsert_faq(store: RecordStore, city_name: str, questions: list[FaqItem]) -> CityFaq:
    items = [q.model_dump(by_alias=True) for q in questions]
    existing = get_faq(store, city_name)
    if existing is None:
        ref = store.collection(COLLECTION).add(
            {"cityName": city_name, "questions": items, "createdAt": now_ms()}
        )
    else:
        ref = store.collection(COLLECTION).doc(existing.id)
        ref.update({"questions": items, "updatedAt": now_ms()})
    return CityFaq.model_validate(ref.get().to_dict())
