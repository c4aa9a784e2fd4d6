"""Pydantic schemas for launderette listings."""

from typing import Literal, Optional

from pydantic import (
    AnyHttpUrl,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from launderette.schemas.common import CamelModel

PriceRange = Literal["budget", "moderate", "premium"]

_http_url = TypeAdapter(AnyHttpUrl)


class ListingBase(CamelModel):
    name: str = Field(..., min_length=1, description="Business name")
    address: str = Field(..., min_length=1)
    city: Optional[str] = None
    lat: float
    lng: float
    features: list[str] = Field(default_factory=list)
    is_premium: bool = False
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr | Literal[""]] = None
    website: Optional[str] = None
    photo_urls: list[str] = Field(default_factory=list)
    opening_hours: Optional[dict[str, str]] = Field(
        None, description="Day name (lowercase) to hours text or 'Closed'"
    )
    price_range: Optional[PriceRange] = None

    @field_validator("website")
    @classmethod
    def validate_website(cls, value: Optional[str]) -> Optional[str]:
        # Keep the string as entered; only check that it parses.
        if value:
            try:
                _http_url.validate_python(value)
            except ValidationError as exc:
                raise ValueError("website must be a valid http(s) URL") from exc
        return value


class ListingCreate(ListingBase):
    """Body of create/update requests."""


class Listing(ListingBase):
    id: str
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None


class ListingOut(Listing):
    distance: Optional[float] = Field(None, description="Miles from the search origin")


class CityCount(CamelModel):
    city: str
    count: int
