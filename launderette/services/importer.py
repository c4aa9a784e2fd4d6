"""Bulk listing import from scraped JSON records."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError

from launderette.db.store import RecordStore
from launderette.schemas.listing import ListingCreate
from launderette.services import listings as listing_service
from launderette.services.hours import parse_opening_hours

logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    imported: int = 0
    skipped: int = 0


def iter_records(path: Path) -> Iterator[dict[str, Any]]:
    """Yield records from a JSON array file or a JSONL file."""
    text = path.read_text(encoding="utf-8").strip()
    if text.startswith("["):
        yield from json.loads(text)
        return
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Skipping unparseable line: %.80s", line)


def record_to_listing(record: dict[str, Any]) -> ListingCreate:
    """Build a listing from a raw record whose hours are a compact string."""
    hours = record.get("openingHours")
    data = dict(record)
    if isinstance(hours, str):
        data["openingHours"] = parse_opening_hours(hours)
    elif hours is None:
        data.pop("openingHours", None)
    if "features" in data and isinstance(data["features"], str):
        data["features"] = [f.strip() for f in data["features"].split(",") if f.strip()]
    return ListingCreate.model_validate(data)


def import_listings(path: Path, store: RecordStore | None, dry_run: bool = False) -> ImportSummary:
    """Validate every record and add it to the store (or just print it)."""
    summary = ImportSummary()
    for record in iter_records(path):
        try:
            listing = record_to_listing(record)
        except ValidationError as exc:
            summary.skipped += 1
            logger.warning("[SKIP] %s: %s", record.get("name", "<unnamed>"), exc.errors())
            continue

        if dry_run or store is None:
            print(json.dumps(listing.to_document(), ensure_ascii=False))
        else:
            listing_service.create_listing(store, listing)
        summary.imported += 1
    return summary
