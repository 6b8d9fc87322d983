"""
Persistent Store
The narrow table API the services talk to, and the SQLAlchemy-backed
implementation used for local development and self-hosted Postgres.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from stays.core.exceptions import PersistenceError
from stays.db.base import Base
from stays.models.property import Property, PropertyImage  # noqa: F401  registers the tables

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
Filters = Mapping[str, Any]


class Store:
    """
    Table-level operations over the hosted backend.

    Filters are column equality maps. Every method is a coroutine and raises
    PersistenceError with the backend's message when the call fails.
    """

    #: True when ``replace`` runs delete + insert as one unit
    supports_transactions: bool = False

    async def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Filters] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Row]:
        raise NotImplementedError

    async def insert(self, table: str, rows: Sequence[Row]) -> List[Row]:
        raise NotImplementedError

    async def update(self, table: str, patch: Row, filters: Filters) -> None:
        raise NotImplementedError

    async def delete(self, table: str, filters: Filters) -> None:
        raise NotImplementedError

    async def replace(self, table: str, filters: Filters, rows: Sequence[Row]) -> List[Row]:
        """Delete the rows matching ``filters`` and insert ``rows`` atomically."""
        raise NotImplementedError(f"{type(self).__name__} has no transactional replace")


class SqlStore(Store):
    """Store over any SQLAlchemy database holding the `properties` tables."""

    supports_transactions = True

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _table(self, name: str) -> Table:
        try:
            return Base.metadata.tables[name]
        except KeyError:
            raise PersistenceError(f"Unknown table: {name}", table=name)

    def _where(self, table: Table, stmt, filters: Optional[Filters]):
        for column, value in (filters or {}).items():
            stmt = stmt.where(table.c[column] == value)
        return stmt

    def _insert_rows(self, session: Session, table: Table, rows: Sequence[Row]) -> List[Row]:
        inserted = []
        for row in rows:
            result = session.execute(insert(table).values(**row).returning(*table.c))
            inserted.append(dict(result.one()._mapping))
        return inserted

    def _run(self, operation: str, table_name: str, work):
        """Run ``work(session, table)`` in one transaction, wrapping failures.

        Blocking; the async API calls it through the threadpool.
        """
        table = self._table(table_name)
        try:
            with self.session_factory() as session:
                with session.begin():
                    return work(session, table)
        except (SQLAlchemyError, KeyError) as e:
            message = str(getattr(e, "orig", None) or e)
            logger.error(f"[STORE] {operation} on {table_name} failed: {message}")
            raise PersistenceError(message, operation=operation, table=table_name) from e

    # ── Store API ─────────────────────────────────────────────────────────────

    async def select(self, table, columns="*", filters=None, order_by=None, descending=False):
        def work(session: Session, t: Table) -> List[Row]:
            if columns.strip() == "*":
                cols = list(t.c)
            else:
                cols = [t.c[name.strip()] for name in columns.split(",")]
            stmt = self._where(t, select(*cols), filters)
            if order_by:
                stmt = stmt.order_by(t.c[order_by].desc() if descending else t.c[order_by])
            return [dict(row._mapping) for row in session.execute(stmt)]

        return await run_in_threadpool(self._run, "select", table, work)

    async def insert(self, table, rows):
        def work(session: Session, t: Table) -> List[Row]:
            return self._insert_rows(session, t, rows)

        return await run_in_threadpool(self._run, "insert", table, work)

    async def update(self, table, patch, filters):
        def work(session: Session, t: Table) -> None:
            session.execute(self._where(t, update(t), filters).values(**patch))

        await run_in_threadpool(self._run, "update", table, work)

    async def delete(self, table, filters):
        def work(session: Session, t: Table) -> None:
            session.execute(self._where(t, delete(t), filters))

        await run_in_threadpool(self._run, "delete", table, work)

    async def replace(self, table, filters, rows):
        def work(session: Session, t: Table) -> List[Row]:
            session.execute(self._where(t, delete(t), filters))
            return self._insert_rows(session, t, rows)

        return await run_in_threadpool(self._run, "replace", table, work)
