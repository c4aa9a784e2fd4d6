"""Expose API endpoint routers."""

from launderette.api.endpoints import (
    analytics,
    blog,
    contact,
    corrections,
    directory,
    faqs,
    launderettes,
    reviews,
    sitemap,
)

__all__ = [
    "analytics",
    "blog",
    "contact",
    "corrections",
    "directory",
    "faqs",
    "launderettes",
    "reviews",
    "sitemap",
]
