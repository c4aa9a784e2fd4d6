"""Blog post schemas."""

from typing import Optional

from pydantic import Field

from launderette.schemas.common import CamelModel


class BlogPostCreate(CamelModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: str = ""
    content: str = Field(..., min_length=1)
    author: str = "LaunderetteNear.me Team"
    published_at: int = Field(..., description="Epoch milliseconds")
    reading_time: Optional[int] = Field(None, ge=1, description="Minutes")


class BlogPost(BlogPostCreate):
    id: str


class BlogPostSummary(CamelModel):
    """Listing-page view of a post (no body)."""

    id: str
    title: str
    slug: str
    excerpt: str
    author: str
    published_at: int
    reading_time: Optional[int] = None
