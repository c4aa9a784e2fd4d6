"""Expose schemas for easier import."""

from launderette.schemas.listing import CityCount, Listing, ListingCreate, ListingOut  # noqa: F401
from launderette.schemas.review import RatingSummary, Review, ReviewCreate  # noqa: F401
from launderette.schemas.correction import Correction, CorrectionCreate  # noqa: F401
from launderette.schemas.analytics import (  # noqa: F401
    AnalyticsEvent,
    AnalyticsEventCreate,
    AnalyticsSummary,
)
from launderette.schemas.faq import CityFaq, CityFaqUpsert, FaqItem  # noqa: F401
from launderette.schemas.geocode import GeocodingResult  # noqa: F401
