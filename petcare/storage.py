from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterator, Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError


def _json_safe(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def row_to_dict(row: Mapping[str, Any]) -> dict:
    return {key: _json_safe(value) for key, value in row.items()}


class SqlStore:
    """
    Storage client handed to every service.

    Each call runs one parameterized SQL statement (``:name`` placeholders) on the
    given SQLAlchemy session. Mutations are committed immediately; any driver
    failure rolls the session back and is re-raised as ``StorageError``.
    """

    def __init__(self, session):
        self._session = session

    def fetch_all(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict]:
        with self._statement(sql):
            rows = self._session.execute(text(sql), dict(params or {})).mappings().all()
        return [row_to_dict(r) for r in rows]

    def fetch_one(self, sql: str, params: Mapping[str, Any] | None = None) -> dict | None:
        with self._statement(sql):
            row = self._session.execute(text(sql), dict(params or {})).mappings().first()
        return row_to_dict(row) if row is not None else None

    def insert(self, sql: str, params: Mapping[str, Any]) -> int:
        """Run an INSERT and return the generated primary key.

        PostgreSQL drivers leave ``lastrowid`` empty, so there the key is read
        back with ``RETURNING id``.
        """
        returning = self._dialect_name() == "postgresql"
        if returning:
            sql = f"{sql.rstrip()} RETURNING id"
        with self._statement(sql):
            result = self._session.execute(text(sql), dict(params))
            new_id = result.scalar_one() if returning else result.lastrowid
            self._session.commit()
        return new_id

    def execute(self, sql: str, params: Mapping[str, Any]) -> int:
        """Run an UPDATE or DELETE and return the number of affected rows."""
        with self._statement(sql):
            result = self._session.execute(text(sql), dict(params))
            affected = result.rowcount
            self._session.commit()
        return affected

    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    @contextmanager
    def _statement(self, sql: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self._session.rollback()
            detail = str(getattr(e, "orig", None) or e)
            logging.error(f"SQL statement failed ({' '.join(sql.split())}): {detail}", exc_info=True)
            raise StorageError("Database operation failed", detail=detail) from e
