"""Blog posts: read side for the API, write side for the generation script."""

from __future__ import annotations

import math
import re

from launderette.core.errors import ConflictError
from launderette.db.store import RecordStore
from launderette.schemas.blog import BlogPost, BlogPostCreate

COLLECTION = "blog_posts"

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 160


def reading_time(content: str) -> int:
    """Whole minutes to read ``content``, at least one."""
    words = len(content.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def make_excerpt(content: str) -> str:
    """First paragraph, cut to ``EXCERPT_LENGTH`` characters with an ellipsis."""
    first = content.strip().split("\n\n")[0].strip()
    if len(first) <= EXCERPT_LENGTH:
        return first
    return first[: EXCERPT_LENGTH - 3] + "..."


def slugify(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")


def list_posts(store: RecordStore) -> list[BlogPost]:
    """Newest first."""
    snapshots = store.collection(COLLECTION).order_by("publishedAt", "desc").get()
    return [BlogPost.model_validate(s.to_dict()) for s in snapshots]


def get_post_by_slug(store: RecordStore, slug: str) -> BlogPost | None:
    snapshots = store.collection(COLLECTION).where("slug", "==", slug).limit(1).get()
    if not snapshots:
        return None
    return BlogPost.model_validate(snapshots[0].to_dict())


def add_post(store: RecordStore, payload: BlogPostCreate) -> BlogPost:
    """Store a new post; slugs are unique."""
    if get_post_by_slug(store, payload.slug) is not None:
        raise ConflictError(f"Blog post {payload.slug!r} already exists")
    data = payload.to_document()
    data["excerpt"] = payload.excerpt or make_excerpt(payload.content)
    data["readingTime"] = payload.reading_time or reading_time(payload.content)
    ref = store.collection(COLLECTION).add(data)
    return BlogPost.model_validate(ref.get().to_dict())
