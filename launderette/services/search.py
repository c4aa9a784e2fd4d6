"""Listing filter/rank pipeline.

Filters run in a fixed order (features, price tier, open now), then each
survivor is annotated with its distance from the search origin and the
result is sorted: premium listings first, then nearest first. The sort is
stable, so listings without a distance keep their filtered order.
"""

from __future__ import annotations

from datetime import datetime
from functools import cmp_to_key
from typing import Iterable, NamedTuple, Optional, Sequence
from zoneinfo import ZoneInfo

from launderette.schemas.listing import CityCount, Listing
from launderette.services.geo import haversine_miles
from launderette.services.hours import is_open_at

DEFAULT_TIMEZONE = "Europe/London"


class RankedListing(NamedTuple):
    listing: Listing
    distance: Optional[float]


def _compare(a: RankedListing, b: RankedListing) -> int:
    if a.listing.is_premium != b.listing.is_premium:
        return -1 if a.listing.is_premium else 1
    if a.distance is not None and b.distance is not None:
        if a.distance < b.distance:
            return -1
        if a.distance > b.distance:
            return 1
    return 0


def local_time(now: datetime | None, timezone: str) -> datetime:
    """``now`` (default: the current instant) as a naive wall-clock time in ``timezone``."""
    tz = ZoneInfo(timezone)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    return now.replace(tzinfo=None)


def rank_listings(
    listings: Iterable[Listing],
    selected_features: Sequence[str] = (),
    price_range: str | None = None,
    open_now: bool = False,
    origin: tuple[float, float] | None = None,
    now: datetime | None = None,
    timezone: str = DEFAULT_TIMEZONE,
) -> list[RankedListing]:
    """Filter, annotate with distance (miles) and order ``listings``.

    Opening hours are read as wall-clock times in ``timezone``. An aware
    ``now`` is converted to it; a naive one is taken as already local.
    """
    survivors = list(listings)

    if selected_features:
        survivors = [
            l for l in survivors if all(f in l.features for f in selected_features)
        ]

    if price_range:
        survivors = [l for l in survivors if l.price_range == price_range]

    if open_now:
        moment = local_time(now, timezone)
        survivors = [l for l in survivors if is_open_at(l.opening_hours, moment)]

    if origin is not None:
        lat, lng = origin
        ranked = [
            RankedListing(l, haversine_miles(lat, lng, l.lat, l.lng)) for l in survivors
        ]
    else:
        ranked = [RankedListing(l, None) for l in survivors]

    return sorted(ranked, key=cmp_to_key(_compare))


def available_features(listings: Iterable[Listing]) -> list[str]:
    """Sorted distinct feature tags across ``listings``."""
    return sorted({feature for l in listings for feature in l.features})


def filter_by_city(listings: Iterable[Listing], city: str) -> list[Listing]:
    wanted = city.strip().lower()
    return [l for l in listings if (l.city or "").lower() == wanted]


def city_counts(listings: Iterable[Listing]) -> list[CityCount]:
    """Number of listings per city, sorted by city name."""
    counts: dict[str, int] = {}
    for l in listings:
        if l.city:
            counts[l.city] = counts.get(l.city, 0) + 1
    return [CityCount(city=city, count=count) for city, count in sorted(counts.items())]
