"""Schemaless document model."""

from sqlalchemy import JSON, BigInteger, Column, Index, String

from launderette.db.base import Base


class Document(Base):
    """One document of a named collection; the payload is free-form JSON."""

    __tablename__ = "documents"
    __table_args__ = (Index("ix_documents_collection", "collection"),)

    collection = Column(String(64), primary_key=True)
    id = Column(String(40), primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(BigInteger, nullable=False)  # epoch ms
    updated_at = Column(BigInteger)
