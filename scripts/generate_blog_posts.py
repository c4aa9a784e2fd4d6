"""
Blog post generation script
---------------------------
Writes one article per topic with the LLM and stores it in the blog_posts
collection. Topics whose slug already exists are skipped.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

sys.path.insert(0, str(PROJECT_ROOT))

from launderette.core.config import settings
from launderette.db.store import build_store, now_ms
from launderette.schemas.blog import BlogPostCreate
from launderette.services import blog as blog_service
from launderette.services.llm import BlogWriter

DAY_MS = 24 * 60 * 60 * 1000

# (title, prompt)
TOPICS = [
    (
        "10 Money-Saving Laundry Tips Every UK Household Should Know",
        "Write a practical 1000-word post on cutting laundry costs in the UK: wash "
        "temperatures, detergent doses, air drying versus tumble drying, and when a "
        "launderette beats washing at home. Include rough cost comparisons.",
    ),
    (
        "How to Choose the Right Launderette: A First-Timer's Guide",
        "Write a friendly 900-word guide for first-time launderette users in the UK: "
        "what to look for, what to bring, how pricing works, etiquette, and what a "
        "service wash is.",
    ),
    (
        "Washing Machine vs Launderette: Which is More Cost-Effective?",
        "Write a balanced 1100-word comparison of owning a washing machine and using "
        "a launderette in the UK, covering purchase, running and maintenance costs "
        "for different household sizes.",
    ),
    (
        "The Ultimate Duvet and Bedding Cleaning Guide",
        "Write a 1000-word guide to cleaning duvets, pillows and bedding: filling "
        "types, how often to wash, machine capacity, drying, and when to use a "
        "launderette's large machines.",
    ),
    (
        "Winter Laundry Tips: Drying Clothes in UK Weather",
        "Write a 1000-word guide to drying laundry in a UK winter: condensation and "
        "mould, heated airers, dehumidifiers, energy costs, and when tumble drying "
        "or a launderette makes sense.",
    ),
    (
        "Student's Guide to Laundry: Essential Tips for University Life",
        "Write a 900-word guide for UK university students doing their own laundry "
        "for the first time: sorting, machine settings, shared facilities and "
        "budgeting.",
    ),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate launderette blog posts")
    parser.add_argument("--limit", type=int, default=None, help="at most this many new posts")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds between LLM calls")
    parser.add_argument("--database-url", default=str(settings.database_url))
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")
    store = build_store(args.database_url)
    writer = BlogWriter()

    created = skipped = failed = 0
    for title, prompt in TOPICS:
        if args.limit is not None and created >= args.limit:
            break
        slug = blog_service.slugify(title)
        if blog_service.get_post_by_slug(store, slug) is not None:
            skipped += 1
            continue

        print(f"Generating: {title}...")
        try:
            content = writer.write(prompt)
        except Exception as exc:  # noqa: BLE001
            failed += 1
            print(f"[FAIL] {title}: {exc}", file=sys.stderr)
            continue

        post = blog_service.add_post(
            store,
            BlogPostCreate(
                title=title,
                slug=slug,
                content=content,
                # Spread publish dates over the last 30 days.
                published_at=now_ms() - random.randint(0, 30 * DAY_MS),
            ),
        )
        created += 1
        print(f"[OK] {post.slug} ({post.reading_time} min read)")
        time.sleep(args.delay)

    print(f"\nCreated {created}, skipped {skipped}, failed {failed}")


if __name__ == "__main__":
    main()
