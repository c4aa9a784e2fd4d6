"""City FAQ schemas."""

from typing import Optional

from pydantic import Field

from launderette.schemas.common import CamelModel


class FaqItem(CamelModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class CityFaqUpsert(CamelModel):
    questions: list[FaqItem] = Field(..., min_length=1)


class CityFaq(CamelModel):
    id: str
    city_name: str
    questions: list[FaqItem]
    created_at: int
    updated_at: Optional[int] = None
