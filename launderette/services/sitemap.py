"""sitemap.xml generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable
from urllib.parse import quote
from xml.etree import ElementTree as ET

from launderette.schemas.blog import BlogPost
from launderette.schemas.listing import Listing

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, change frequency, priority)
STATIC_PAGES = (
    ("", "daily", 1.0),
    ("/cities", "weekly", 0.9),
    ("/blog", "weekly", 0.7),
    ("/laundry-symbols", "monthly", 0.6),
    ("/about", "monthly", 0.5),
    ("/contact", "monthly", 0.5),
    ("/privacy", "yearly", 0.3),
    ("/terms", "yearly", 0.3),
)


@dataclass
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def _from_ms(value: int | None, default: datetime) -> datetime:
    if value is None:
        return default
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def build_entries(
    base_url: str,
    listings: Iterable[Listing],
    posts: Iterable[BlogPost] = (),
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Static pages, then one page per city, one per listing, one per blog post."""
    now = now or datetime.now(timezone.utc)
    base_url = base_url.rstrip("/")
    listings = list(listings)

    entries = [
        SitemapEntry(f"{base_url}{path}", now, freq, priority)
        for path, freq, priority in STATIC_PAGES
    ]

    cities = sorted({l.city for l in listings if l.city})
    entries.extend(
        SitemapEntry(f"{base_url}/city/{quote(city, safe='')}", now, "weekly", 0.9)
        for city in cities
    )

    entries.extend(
        SitemapEntry(
            f"{base_url}/launderette/{l.id}",
            _from_ms(l.created_at, now),
            "weekly",
            0.8 if l.is_premium else 0.7,
        )
        for l in listings
    )

    entries.extend(
        SitemapEntry(
            f"{base_url}/blog/{quote(post.slug, safe='')}",
            _from_ms(post.published_at, now),
            "monthly",
            0.6,
        )
        for post in posts
    )
    return entries


def render_sitemap(entries: Iterable[SitemapEntry]) -> bytes:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        ET.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url, "changefreq").text = entry.change_frequency
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)
