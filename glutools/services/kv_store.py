"""
Key-value stores holding the JSON collections.

Every collection lives under one key; callers read the whole value, mutate
it and write it back. No locking: concurrent writers to the same key are
last-writer-wins.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from sqlalchemy import JSON, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under `key`, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under `key`."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove `key`; no-op when absent."""

    def close(self) -> None:
        pass


class MemoryKeyValueStore(KeyValueStore):
    """
    Process-local store (dev / tests).
    Values go through JSON both ways so nothing is shared with callers.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


# =========================================================
# SQL backend
# =========================================================
class Base(DeclarativeBase):
    pass


class KVEntry(Base):
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)


class SqlKeyValueStore(KeyValueStore):
    """
    One row per key in the `kv_store` table.
    Each call opens its own session and commits immediately.
    """

    def __init__(self, database_url: str):
        engine_kwargs: Dict[str, Any] = {}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(database_url, **engine_kwargs)
        Base.metadata.create_all(bind=self.engine)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _session(self) -> Session:
        return self._session_factory()

    def get(self, key: str) -> Optional[Any]:
        with self._session() as db:
            row = db.execute(select(KVEntry).where(KVEntry.key == key)).scalar_one_or_none()
            return row.value if row else None

    def set(self, key: str, value: Any) -> None:
        with self._session() as db:
            db.merge(KVEntry(key=key, value=value))
            db.commit()

    def delete(self, key: str) -> None:
        with self._session() as db:
            row = db.get(KVEntry, key)
            if row is not None:
                db.delete(row)
                db.commit()

    def close(self) -> None:
        self.engine.dispose()


def build_store(backend: str, database_url: str = "") -> KeyValueStore:
    backend = (backend or "memory").strip().lower()
    if backend == "memory":
        logger.info("Using in-memory key-value store")
        return MemoryKeyValueStore()
    if backend == "sql":
        logger.info("Using SQL key-value store")
        return SqlKeyValueStore(database_url)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")
