"""ORM models."""

from launderette.models.document import Document  # noqa: F401
