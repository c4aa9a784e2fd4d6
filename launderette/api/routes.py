"""Root API router."""

from fastapi import APIRouter

from launderette.api.endpoints import (
    analytics,
    blog,
    contact,
    corrections,
    directory,
    faqs,
    launderettes,
    reviews,
)

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


router.include_router(launderettes.router)
router.include_router(reviews.router)
router.include_router(corrections.router)
router.include_router(analytics.router)
router.include_router(faqs.router)
router.include_router(directory.router)
router.include_router(blog.router)
router.include_router(contact.router)

# sitemap is mounted at the site root in main.py
