"""
City FAQ generation script
--------------------------
For every city with listings but no FAQ, asks the LLM for five questions
and answers and upserts them.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

sys.path.insert(0, str(PROJECT_ROOT))

from launderette.core.config import settings
from launderette.db.store import build_store
from launderette.services import faqs as faq_service
from launderette.services import listings as listing_service
from launderette.services.llm import FaqGenerator
from launderette.services.search import city_counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate per-city launderette FAQs")
    parser.add_argument("--city", action="append", help="only these cities (repeatable)")
    parser.add_argument("--overwrite", action="store_true", help="regenerate existing FAQs")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds between LLM calls")
    parser.add_argument("--database-url", default=str(settings.database_url))
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")
    store = build_store(args.database_url)
    generator = FaqGenerator()

    cities = args.city or [c.city for c in city_counts(listing_service.list_listings(store))]
    created = skipped = failed = 0

    for city in cities:
        if not args.overwrite and faq_service.get_faq(store, city) is not None:
            skipped += 1
            continue
        try:
            items = generator.generate(city)
        except Exception as exc:  # noqa: BLE001
            failed += 1
            print(f"[FAIL] {city}: {exc}", file=sys.stderr)
            continue
        faq_service.upsert_faq(store, city, items)
        created += 1
        print(f"[OK] {city}: {len(items)} FAQs")
        time.sleep(args.delay)

    print(f"\nCreated {created}, skipped {skipped}, failed {failed}")


if __name__ == "__main__":
    main()
