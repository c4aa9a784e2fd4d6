"""
Listing import script
---------------------
Reads scraped listings (JSON array or JSONL) whose ``openingHours`` is a
compact string like "Mon-Fri: 9:00am - 7:00pm, Sun: Closed", converts the
hours to a per-day map and stores each listing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

sys.path.insert(0, str(PROJECT_ROOT))

from launderette.core.config import settings
from launderette.db.store import build_store
from launderette.services.importer import import_listings


def main() -> None:
    parser = argparse.ArgumentParser(description="listings.json → document store")
    parser.add_argument("path", type=Path, help="JSON array or JSONL file")
    parser.add_argument("--dry-run", action="store_true", help="print documents instead of writing")
    parser.add_argument("--database-url", default=str(settings.database_url))
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")

    if not args.path.exists():
        print(f"File not found: {args.path}", file=sys.stderr)
        sys.exit(1)

    store = None if args.dry_run else build_store(args.database_url)
    summary = import_listings(args.path, store, dry_run=args.dry_run)
    print(f"Imported {summary.imported} listings, skipped {summary.skipped}", file=sys.stderr)


if __name__ == "__main__":
    main()
