"""Persistence gateway: the only component that talks to the store.

Queries are either SQLAlchemy Core statements or raw SQL strings with
``:name`` placeholders. Rows come back as plain dicts. Any driver failure is
re-raised as ``StorageError`` (``ConstraintViolation`` for integrity errors);
nothing is retried.

The store is a single SQLite file shared by every request, so access goes
through one asyncio lock: statements and transactions never interleave.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Mapping, Union

from sqlalchemy import event, text
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine
from sqlalchemy.sql import Executable

from eduplay import models  # noqa: F401  (registers tables on Base.metadata)
from eduplay.core.errors import ConstraintViolation, StorageError
from eduplay.db.base import Base

logger = logging.getLogger("eduplay.db")

Query = Union[str, Executable]
Params = Mapping[str, Any] | None


@dataclass(frozen=True)
class ExecuteResult:
    inserted_id: int | None  # rowid of the last INSERT; meaningless for other statements
    rows_affected: int


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Connection:
    """Query operations bound to one open connection (and its transaction)."""

    def __init__(self, conn: AsyncConnection):
        self._conn = conn

    async def _run(self, query: Query, params: Params) -> CursorResult:
        statement = text(query) if isinstance(query, str) else query
        try:
            if params is None:
                return await self._conn.execute(statement)
            return await self._conn.execute(statement, dict(params))
        except IntegrityError as exc:
            logger.warning("Constraint violation: %s", exc.orig)
            raise ConstraintViolation("Constraint violation") from exc
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Statement failed: %s", exc)
            raise StorageError() from exc

    async def execute(self, query: Query, params: Params = None) -> ExecuteResult:
        result = await self._run(query, params)
        return ExecuteResult(inserted_id=result.lastrowid, rows_affected=result.rowcount)

    async def fetch_one(self, query: Query, params: Params = None) -> dict | None:
        result = await self._run(query, params)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def fetch_all(self, query: Query, params: Params = None) -> list[dict]:
        result = await self._run(query, params)
        return [dict(row) for row in result.mappings().all()]


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Connection]:
        """Run several statements atomically. Commits on exit, rolls back on error."""
        async with self._lock:
            try:
                async with self.engine.begin() as conn:
                    yield Connection(conn)
            except SQLAlchemyError as exc:
                # connect / commit failures; statement errors are already wrapped
                logger.error("Transaction failed: %s", exc)
                raise StorageError() from exc

    async def execute(self, query: Query, params: Params = None) -> ExecuteResult:
        async with self.transaction() as conn:
            return await conn.execute(query, params)

    async def fetch_one(self, query: Query, params: Params = None) -> dict | None:
        async with self.transaction() as conn:
            return await conn.fetch_one(query, params)

    async def fetch_all(self, query: Query, params: Params = None) -> list[dict]:
        async with self.transaction() as conn:
            return await conn.fetch_all(query, params)

    async def create_schema(self) -> None:
        """Create users, games, user_progress and achievements if missing."""
        async with self._lock:
            try:
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except SQLAlchemyError as exc:
                logger.error("Schema creation failed: %s", exc)
                raise StorageError() from exc

    async def dispose(self) -> None:
        await self.engine.dispose()
