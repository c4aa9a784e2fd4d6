from typing import Literal

from pydantic import EmailStr, Field

from launderette.schemas.common import CamelModel


class ContactSubmissionCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactSubmission(ContactSubmissionCreate):
    id: str
    status: Literal["new", "read", "replied"] = "new"
    created_at: int
