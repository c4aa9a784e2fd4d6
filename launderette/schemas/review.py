"""Schemas for reviews and ratings."""

from typing import Optional

from pydantic import EmailStr, Field

from launderette.schemas.common import CamelModel


class ReviewCreate(CamelModel):
    user_name: str = Field(..., min_length=1)
    user_email: Optional[EmailStr] = None
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)


class Review(ReviewCreate):
    id: str
    launderette_id: str
    created_at: int


class RatingSummary(CamelModel):
    average: float
    count: int
