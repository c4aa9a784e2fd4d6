import json

from launderette.services import listings as listing_service
from launderette.services.hours import CLOSED
from launderette.services.importer import import_listings, record_to_listing

RECORD = {
    "name": "Wash & Go",
    "address": "1 Market Street, Bath BA1 1AA",
    "city": "Bath",
    "lat": 51.381,
    "lng": -2.359,
    "features": "Service Wash, Free WiFi",
    "openingHours": "Mon-Sat: 8:00am - 8:00pm, Sun: Closed",
}


def test_record_to_listing_parses_hours_and_features():
    listing = record_to_listing(RECORD)
    assert listing.opening_hours["saturday"] == "8:00am - 8:00pm"
    assert listing.opening_hours["sunday"] == CLOSED
    assert listing.features == ["Service Wash", "Free WiFi"]


def test_import_json_array(tmp_path, store):
    path = tmp_path / "listings.json"
    path.write_text(json.dumps([RECORD, {"name": "No coordinates"}]), encoding="utf-8")

    summary = import_listings(path, store)

    assert (summary.imported, summary.skipped) == (1, 1)
    [stored] = listing_service.list_listings(store)
    assert stored.name == "Wash & Go"
    assert stored.created_at is not None


def test_import_jsonl_dry_run(tmp_path, store, capsys):
    path = tmp_path / "listings.jsonl"
    path.write_text(json.dumps(RECORD) + "\n\nnot json\n", encoding="utf-8")

    summary = import_listings(path, store, dry_run=True)

    assert summary.imported == 1
    assert listing_service.list_listings(store) == []
    printed = json.loads(capsys.readouterr().out)
    assert printed["openingHours"]["monday"] == "8:00am - 8:00pm"
