"""
Duplicate cleanup script
------------------------
Deletes listings in the given cities that were created within the last N
minutes (used to undo an import that ran twice).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

sys.path.insert(0, str(PROJECT_ROOT))

from launderette.core.config import settings
from launderette.db.store import build_store, now_ms
from launderette.services import listings as listing_service


def main() -> None:
    parser = argparse.ArgumentParser(description="Delete recently imported listings")
    parser.add_argument("cities", nargs="+", help="city names")
    parser.add_argument("--minutes", type=int, default=20)
    parser.add_argument("--yes", action="store_true", help="actually delete (default: list only)")
    parser.add_argument("--database-url", default=str(settings.database_url))
    args = parser.parse_args()

    store = build_store(args.database_url)
    cutoff = now_ms() - args.minutes * 60 * 1000
    deleted = 0

    for city in args.cities:
        snapshots = (
            store.collection(listing_service.COLLECTION)
            .where("city", "==", city)
            .where("createdAt", ">", cutoff)
            .get()
        )
        print(f"Found {len(snapshots)} recent listings in {city}")
        for snap in snapshots:
            print(f"  - {snap.data.get('name')} ({snap.id})")
            if args.yes:
                store.collection(listing_service.COLLECTION).doc(snap.id).delete()
                deleted += 1

    if args.yes:
        print(f"\nDeleted {deleted} duplicate listings")
    else:
        print("\nDry run; pass --yes to delete")


if __name__ == "__main__":
    main()
