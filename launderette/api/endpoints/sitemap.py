"""sitemap.xml (served at the site root, outside the API prefix)."""

from fastapi import APIRouter, Depends, Request, Response

from launderette.api.deps import get_store
from launderette.db.store import RecordStore
from launderette.services import blog as blog_service
from launderette.services import listings as listing_service
from launderette.services.sitemap import build_entries, render_sitemap

router = APIRouter(tags=["seo"])


@router.get("/sitemap.xml", response_class=Response)
def sitemap(request: Request, store: RecordStore = Depends(get_store)) -> Response:
    site_url = request.app.state.settings.site_url
    entries = build_entries(
        site_url, listing_service.list_listings(store), blog_service.list_posts(store)
    )
    return Response(content=render_sitemap(entries), media_type="application/xml")
