"""Blog endpoints (read-only; posts are written by scripts/generate_blog_posts.py)."""

from fastapi import APIRouter, Depends

from launderette.api.deps import get_store
from launderette.core.errors import NotFoundError
from launderette.db.store import RecordStore
from launderette.schemas.blog import BlogPost, BlogPostSummary
from launderette.services import blog as blog_service

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=list[BlogPostSummary])
def list_blog_posts(store: RecordStore = Depends(get_store)) -> list[BlogPostSummary]:
    """Newest posts first, without their bodies."""
    return [
        BlogPostSummary.model_validate(post.model_dump())
        for post in blog_service.list_posts(store)
    ]


@router.get("/{slug}", response_model=BlogPost)
def get_blog_post(slug: str, store: RecordStore = Depends(get_store)) -> BlogPost:
    post = blog_service.get_post_by_slug(store, slug)
    if post is None:
        raise NotFoundError("Blog post")
    return post
