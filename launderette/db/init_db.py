"""Database initialization utilities."""

from sqlalchemy.engine import Engine

from launderette.db.base import Base
from launderette import models  # noqa: F401


def init_db(engine: Engine) -> None:
    """Create the document table (and its indexes) if missing."""
    Base.metadata.create_all(bind=engine)
