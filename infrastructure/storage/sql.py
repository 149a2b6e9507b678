"""SQLAlchemy-backed key-value storage."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text, create_engine, delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from core.exceptions import StorageError

from .base import KeyValueStorage

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for storage tables."""


class StoredValue(Base):
    __tablename__ = "mind_haven_kv"

    key: Mapped[str] = mapped_column(String(191), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )


def _engine_options(url: str) -> dict:
    """SQLite connections are shared with FastAPI worker threads."""

    if not url.startswith("sqlite"):
        return {}
    options: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One connection, otherwise every thread sees its own empty database
        options["poolclass"] = StaticPool
    return options


class SqlKeyValueStorage(KeyValueStorage):
    """Store each key as one row of the ``mind_haven_kv`` table."""

    def __init__(self, url: str | None = None, *, engine: Engine | None = None, echo: bool = False) -> None:
        if engine is None:
            if not url:
                raise StorageError("A database URL or engine is required", operation="connect")
            engine = create_engine(url, echo=echo, future=True, **_engine_options(url))
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to prepare storage table: {exc}", operation="connect") from exc
        logger.debug("SQL key-value storage ready on %s", engine.url.render_as_string(hide_password=True))

    def _read(self, key: str) -> str | None:
        try:
            with self._session_factory() as session:
                return session.execute(
                    select(StoredValue.value).where(StoredValue.key == key)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Failed to read key %s: %s", key, exc)
            raise StorageError(f"Failed to read '{key}'", operation="load") from exc

    def _write(self, key: str, raw: str) -> None:
        try:
            with self._session_factory.begin() as session:
                row = session.get(StoredValue, key)
                if row is None:
                    session.add(StoredValue(key=key, value=raw))
                else:
                    row.value = raw
                    row.updated_at = datetime.now(UTC)
        except SQLAlchemyError as exc:
            logger.error("Failed to write key %s: %s", key, exc)
            raise StorageError(f"Failed to save '{key}'", operation="save") from exc

    def delete(self, key: str) -> None:
        try:
            with self._session_factory.begin() as session:
                session.execute(delete(StoredValue).where(StoredValue.key == key))
        except SQLAlchemyError as exc:
            logger.error("Failed to delete key %s: %s", key, exc)
            raise StorageError(f"Failed to delete '{key}'", operation="delete") from exc

    def keys(self) -> list[str]:
        try:
            with self._session_factory() as session:
                return list(session.execute(select(StoredValue.key)).scalars())
        except SQLAlchemyError as exc:
            raise StorageError("Failed to list keys", operation="keys") from exc

    def close(self) -> None:
        self._engine.dispose()


__all__ = ["SqlKeyValueStorage", "StoredValue"]
