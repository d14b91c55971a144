"""
Table-oriented persistence behind the domain services.

Services only ever talk to a ``Store``: records go in and come out as plain
dicts, filters are column equality, and ordering is by a single column with
``id`` as the tie-breaker. ``MemoryStore`` backs tests and local demos,
``SqlStore`` maps the same calls onto the SQLAlchemy models.
"""
import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from copy import deepcopy

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.errors import StorageError
from marketplace.models import JobRequest, Provider, Quote, User

logger = logging.getLogger(__name__)

TABLES = {
    "users": User,
    "job_requests": JobRequest,
    "providers": Provider,
    "quotes": Quote,
}


class Store(ABC):
    @abstractmethod
    def insert(self, table: str, record: dict) -> dict:
        """Store a new row, assigning an integer ``id`` when none is given."""

    @abstractmethod
    def select_all(self, table: str, filters: dict | None = None,
                   order_by: str | None = None, descending: bool = True) -> list[dict]:
        ...

    @abstractmethod
    def select_one(self, table: str, filters: dict) -> dict | None:
        ...

    @abstractmethod
    def update(self, table: str, filters: dict, patch: dict) -> dict | None:
        """Apply ``patch`` to the first matching row. Returns None if nothing matched."""

    @abstractmethod
    def count(self, table: str, filters: dict | None = None) -> int:
        ...


def _matches(row: dict, filters: dict | None) -> bool:
    return all(row.get(key) == value for key, value in (filters or {}).items())


class MemoryStore(Store):
    def __init__(self):
        self._lock = threading.Lock()
        self._tables: dict[str, list[dict]] = {name: [] for name in TABLES}
        self._next_ids: dict[str, int] = {name: 1 for name in TABLES}

    def _rows(self, table: str) -> list[dict]:
        if table not in self._tables:
            raise StorageError(f"Unknown table: {table}")
        return self._tables[table]

    def insert(self, table, record):
        with self._lock:
            rows = self._rows(table)
            row = deepcopy(record)
            if row.get("id") is None:
                row["id"] = self._next_ids[table]
                self._next_ids[table] += 1
            elif any(r["id"] == row["id"] for r in rows):
                raise StorageError(f"Duplicate id {row['id']!r} in {table}")
            rows.append(row)
            return deepcopy(row)

    def select_all(self, table, filters=None, order_by=None, descending=True):
        with self._lock:
            rows = [deepcopy(r) for r in self._rows(table) if _matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by), r["id"]), reverse=descending)
        return rows

    def select_one(self, table, filters):
        with self._lock:
            for row in self._rows(table):
                if _matches(row, filters):
                    return deepcopy(row)
        return None

    def update(self, table, filters, patch):
        with self._lock:
            for row in self._rows(table):
                if _matches(row, filters):
                    row.update(deepcopy(patch))
                    return deepcopy(row)
        return None

    def count(self, table, filters=None):
        with self._lock:
            return sum(1 for r in self._rows(table) if _matches(r, filters))


def _row_to_dict(obj) -> dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


class SqlStore(Store):
    def __init__(self, db: Session):
        self.db = db

    def _model(self, table: str):
        if table not in TABLES:
            raise StorageError(f"Unknown table: {table}")
        return TABLES[table]

    def _query(self, model, filters: dict | None):
        query = self.db.query(model)
        for key, value in (filters or {}).items():
            query = query.filter(getattr(model, key) == value)
        return query

    @contextmanager
    def _guard(self, action: str, table: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Storage failure during %s on %s: %s", action, table, exc)
            raise StorageError(f"Could not {action} {table}") from exc

    def insert(self, table, record):
        model = self._model(table)
        with self._guard("insert into", table):
            obj = model(**record)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return _row_to_dict(obj)

    def select_all(self, table, filters=None, order_by=None, descending=True):
        model = self._model(table)
        with self._guard("read", table):
            query = self._query(model, filters)
            if order_by:
                column = getattr(model, order_by)
                if descending:
                    query = query.order_by(column.desc(), model.id.desc())
                else:
                    query = query.order_by(column.asc(), model.id.asc())
            return [_row_to_dict(obj) for obj in query.all()]

    def select_one(self, table, filters):
        model = self._model(table)
        with self._guard("read", table):
            obj = self._query(model, filters).first()
            return _row_to_dict(obj) if obj else None

    def update(self, table, filters, patch):
        model = self._model(table)
        with self._guard("update", table):
            obj = self._query(model, filters).first()
            if not obj:
                return None
            for key, value in patch.items():
                setattr(obj, key, value)
            self.db.commit()
            self.db.refresh(obj)
            return _row_to_dict(obj)

    def count(self, table, filters=None):
        model = self._model(table)
        with self._guard("count", table):
            return self._query(model, filters).count()
