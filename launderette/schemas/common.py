"""Shared schema bits."""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire and in stored documents."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_document(self) -> dict[str, Any]:
        """Payload for the document store (no id, no unset optionals)."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None
