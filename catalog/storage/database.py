"""SQLite store with async SQLAlchemy.

Handles:
- Engine and session lifecycle behind an injectable `Database` handle
- Foreign-key enforcement on every SQLite connection
- Translation of driver errors into the storage error taxonomy
- Upsert-by-id shared by the repositories
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import logging
from typing import Any, TypeVar

from sqlalchemy import event, inspect, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog.settings import Settings, get_settings
from catalog.storage.errors import translate_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="Base")


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the async engine and session factory for one store.

    Construct one per application (or per test) and pass it to the
    repositories; nothing in the package reaches for a global engine.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self._engine: AsyncEngine = create_async_engine(url, echo=echo)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Database":
        """Build a handle from application settings."""
        settings = settings or get_settings()
        return cls(settings.async_database_url, echo=settings.debug)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get database session context manager.

        Commits on success, rolls back on error. DBAPI errors raised inside
        the block (or while committing) surface as `StorageError` subclasses.

        Usage:
            async with database.session() as session:
                result = await session.execute(query)
        """
        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except DBAPIError as exc:
            error = translate_error(exc)
            logger.warning(f"Storage operation failed: {type(error).__name__}: {error}")
            raise error from exc

    async def ping(self) -> None:
        """Run a trivial query to make sure the store can be opened."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create all tables (for development/testing; alembic owns production schema)."""
        import catalog.models  # noqa: F401  register mappers on Base.metadata

        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except DBAPIError as exc:
            raise translate_error(exc) from exc

    async def dispose(self) -> None:
        """Close the connection pool."""
        await self._engine.dispose()


def _scalar_default(column: Any) -> Any:
    default = column.default
    if default is not None and default.is_scalar:
        return default.arg
    return None


async def upsert_by_id(session: AsyncSession, record: ModelT) -> int:
    """Insert `record`, or overwrite the row that already holds its id.

    Precondition: `record` is a new (transient) model instance; its id may be
    None. Postcondition: exactly one row carries the returned id and every
    column of that row equals the record's value. An existing row is updated
    in place, never deleted and re-inserted, so dependent rows are untouched.
    Columns the record never set take their scalar default on both branches,
    exactly as an INSERT would give them.
    """
    model = type(record)
    if record.id is not None:
        existing = await session.get(model, record.id)
        if existing is not None:
            given = inspect(record).dict
            for attr in inspect(model).column_attrs:
                if attr.key in given:
                    value = given[attr.key]
                else:
                    value = _scalar_default(attr.columns[0])
                setattr(existing, attr.key, value)
            await session.flush()
            return existing.id

    session.add(record)
    await session.flush()
    return record.id
