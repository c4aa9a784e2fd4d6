"""Document store adapter.

A small query-builder over the ``documents`` table that mimics the
collection/doc API of a hosted document database::

    store.collection("reviews").where("launderetteId", "==", lid) \\
        .order_by("createdAt", "desc").limit(50).get()

Every call is its own round trip and its own transaction. There is no
caching, no retry and no optimistic concurrency control: two writers
updating the same document race and the last commit wins.

Filtering, ordering and limiting run in Python over the collection's
documents; collections here hold at most a couple of thousand entries.
"""

from __future__ import annotations

import logging
import operator
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from launderette.db.init_db import init_db
from launderette.db.session import build_engine, build_session_factory
from launderette.models.document import Document

logger = logging.getLogger(__name__)

_MISSING = object()

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda value, options: value in options,
    "array-contains": lambda value, item: isinstance(value, list) and item in value,
}


class DocumentNotFound(LookupError):
    """Raised when updating a document that does not exist."""

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection}/{doc_id} does not exist")
        self.collection = collection
        self.doc_id = doc_id


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def new_id() -> str:
    return uuid.uuid4().hex[:20]


def _lookup(data: dict[str, Any], path: str) -> Any:
    current: Any = data
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


@dataclass
class DocumentSnapshot:
    """A document read at one point in time."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)
    exists: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.data}


class RecordStore:
    """Entry point: ``store.collection(name)``."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def collection(self, name: str) -> "CollectionQuery":
        return CollectionQuery(self, name)


class CollectionQuery:
    """Immutable query over one collection; builder methods return copies."""

    def __init__(
        self,
        store: RecordStore,
        name: str,
        filters: tuple[tuple[str, str, Any], ...] = (),
        orders: tuple[tuple[str, bool], ...] = (),
        max_results: int | None = None,
    ) -> None:
        self._store = store
        self.name = name
        self._filters = filters
        self._orders = orders
        self._limit = max_results

    def _copy(self, **changes: Any) -> "CollectionQuery":
        params = {
            "filters": self._filters,
            "orders": self._orders,
            "max_results": self._limit,
        }
        params.update(changes)
        return CollectionQuery(self._store, self.name, **params)

    def where(self, field_path: str, op: str, value: Any) -> "CollectionQuery":
        if op not in _OPERATORS:
            raise ValueError(f"Unsupported operator: {op}")
        return self._copy(filters=self._filters + ((field_path, op, value),))

    def order_by(self, field_path: str, direction: str = "asc") -> "CollectionQuery":
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unsupported direction: {direction}")
        return self._copy(orders=self._orders + ((field_path, direction == "desc"),))

    def limit(self, count: int) -> "CollectionQuery":
        if count < 0:
            raise ValueError("limit must be non-negative")
        return self._copy(max_results=count)

    def _matches(self, data: dict[str, Any]) -> bool:
        for field_path, op, value in self._filters:
            current = _lookup(data, field_path)
            if current is _MISSING:
                return False
            try:
                if not _OPERATORS[op](current, value):
                    return False
            except TypeError:
                return False
        return True

    def get(self) -> list[DocumentSnapshot]:
        """Run the query and return matching snapshots."""
        with self._store.session() as session:
            rows = session.execute(
                select(Document.id, Document.data)
                .where(Document.collection == self.name)
                .order_by(Document.created_at, Document.id)
            ).all()

        snapshots = [
            DocumentSnapshot(id=row.id, data=dict(row.data or {}))
            for row in rows
            if self._matches(row.data or {})
        ]

        # Stable sorts applied from the least to the most significant key.
        for field_path, descending in reversed(self._orders):
            def sort_key(snap: DocumentSnapshot, path: str = field_path, desc: bool = descending):
                value = _lookup(snap.data, path)
                if value is _MISSING or value is None:
                    return (0,) if desc else (1,)
                return (1, value) if desc else (0, value)

            snapshots.sort(key=sort_key, reverse=descending)

        if self._limit is not None:
            snapshots = snapshots[: self._limit]
        return snapshots

    def add(self, data: dict[str, Any]) -> "DocumentRef":
        """Insert a new document with a generated id."""
        ref = self.doc(new_id())
        ref.set(data)
        return ref

    def doc(self, doc_id: str | None = None) -> "DocumentRef":
        return DocumentRef(self._store, self.name, doc_id or new_id())


class DocumentRef:
    """Handle on a single document, which may or may not exist yet."""

    def __init__(self, store: RecordStore, collection: str, doc_id: str) -> None:
        self._store = store
        self.collection = collection
        self.id = doc_id

    def _row(self, session: Session) -> Document | None:
        return session.get(Document, (self.collection, self.id))

    def get(self) -> DocumentSnapshot:
        with self._store.session() as session:
            row = self._row(session)
            if row is None:
                return DocumentSnapshot(id=self.id, data={}, exists=False)
            return DocumentSnapshot(id=self.id, data=dict(row.data or {}))

    def set(self, data: dict[str, Any]) -> None:
        """Create the document or replace its payload entirely."""
        with self._store.session() as session:
            row = self._row(session)
            if row is None:
                session.add(
                    Document(
                        collection=self.collection,
                        id=self.id,
                        data=dict(data),
                        created_at=now_ms(),
                    )
                )
            else:
                row.data = dict(data)
                row.updated_at = now_ms()
        logger.debug("set %s/%s", self.collection, self.id)

    def update(self, changes: dict[str, Any]) -> None:
        """Merge ``changes`` into an existing document."""
        with self._store.session() as session:
            row = self._row(session)
            if row is None:
                raise DocumentNotFound(self.collection, self.id)
            # Reassign so the JSON column is flagged dirty.
            row.data = {**(row.data or {}), **changes}
            row.updated_at = now_ms()
        logger.debug("update %s/%s fields=%s", self.collection, self.id, sorted(changes))

    def delete(self) -> None:
        """Delete the document; deleting a missing document is a no-op."""
        with self._store.session() as session:
            row = self._row(session)
            if row is not None:
                session.delete(row)
        logger.debug("delete %s/%s", self.collection, self.id)


def build_store(database_url: str) -> RecordStore:
    """Store over a fresh engine, creating the documents table if needed."""
    engine = build_engine(database_url)
    init_db(engine)
    return RecordStore(build_session_factory(engine))
