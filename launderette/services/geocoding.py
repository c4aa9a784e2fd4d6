"""Free-text geocoding through a Nominatim-compatible search API."""

from __future__ import annotations

import logging

import aiohttp

from launderette.core.errors import GeocodingError
from launderette.schemas.geocode import GeocodingResult

logger = logging.getLogger(__name__)


class Geocoder:
    """Resolve an address string to the best-matching coordinate."""

    def __init__(self, base_url: str, user_agent: str, timeout: float = 10.0) -> None:
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def geocode(self, address: str) -> GeocodingResult | None:
        """Return the first match, ``None`` if nothing matched.

        Raises ``GeocodingError`` when the upstream service misbehaves.
        """
        params = {"format": "json", "q": address, "limit": "1"}
        headers = {"User-Agent": self.user_agent}
        try:
            async with aiohttp.ClientSession(headers=headers) as session:
                async with session.get(
                    self.base_url,
                    params=params,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        raise GeocodingError(f"Geocoding service returned {response.status}")
                    data = await response.json(content_type=None)
        except aiohttp.ClientError as exc:
            logger.error("Geocoding request failed for %r: %s", address, exc)
            raise GeocodingError("Geocoding service unavailable") from exc
        except TimeoutError as exc:
            logger.error("Geocoding request timed out for %r", address)
            raise GeocodingError("Geocoding service timed out") from exc

        if not data:
            return None
        try:
            best = data[0]
            return GeocodingResult(
                lat=float(best["lat"]),
                lng=float(best["lon"]),
                formatted_address=best.get("display_name", address),
            )
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise GeocodingError("Unexpected geocoding response") from exc
