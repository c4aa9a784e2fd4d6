"""Schemas for user-submitted listing corrections."""

from typing import Literal, Optional

from pydantic import EmailStr, Field

from launderette.schemas.common import CamelModel

CorrectionStatus = Literal["pending", "approved", "rejected"]


class CorrectionCreate(CamelModel):
    launderette_id: str = Field(..., min_length=1)
    launderette_name: str = ""
    submitter_name: str = Field(..., min_length=1)
    submitter_email: EmailStr
    field_name: str = Field(..., min_length=1)
    current_value: str = ""
    proposed_value: str = Field(..., min_length=1)
    additional_notes: Optional[str] = None


class Correction(CorrectionCreate):
    id: str
    status: CorrectionStatus = "pending"
    created_at: int
    reviewed_at: Optional[int] = None
    reviewed_by: Optional[str] = None
