from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .store import ATTENDANCE, EMPLOYEES, GOALS, PAYROLL, PERFORMANCE, Filters, Range

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

DEFAULT_TABLES = {
    ATTENDANCE: "attendance_events",
    EMPLOYEES: "employees",
    PAYROLL: "payslips",
    PERFORMANCE: "performance_reviews",
    GOALS: "goals",
}

# Columns holding JSON objects (name -> amount, dimension -> rating).
JSON_COLUMNS = frozenset({"allowances", "deductions", "ratings"})


class MySQLRecordStore:
    """RecordStore over MySQL tables, one table per collection."""

    def __init__(self, conn_factory: DatabaseConnection, *, tables: Optional[Mapping[str, str]] = None):
        self._conn_factory = conn_factory
        self._tables = dict(tables or DEFAULT_TABLES)
        for table in self._tables.values():
            _require_identifier(table)

    def query(self, collection: str, filters: Optional[Filters] = None) -> list[dict]:
        sql, params = build_select(self._table(collection), filters)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_decode_row(r) for r in fetchall(cur)]

    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        sql, params = build_insert(self._table(collection), document)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            new_id = document.get("id") or getattr(cur, "lastrowid", None)
        return str(new_id)

    def _table(self, collection: str) -> str:
        table = self._tables.get(collection)
        if not table:
            raise ValidationError(f"Unknown collection: {collection!r}")
        return table


def build_insert(table: str, document: Mapping[str, Any]) -> tuple[str, tuple]:
    if not document:
        raise ValidationError("Cannot insert an empty record")
    columns = [_require_identifier(c) for c in document]
    params = [
        json.dumps(value, default=str) if c in JSON_COLUMNS and not isinstance(value, str) else value
        for c, value in document.items()
    ]
    names = ", ".join(f"`{c}`" for c in columns)
    placeholders = ", ".join(["%s"] * len(columns))
    return f"INSERT INTO `{table}` ({names}) VALUES ({placeholders})", tuple(params)


def build_select(table: str, filters: Optional[Filters]) -> tuple[str, tuple]:
    clauses: list[str] = []
    params: list[Any] = []
    for column, expected in (filters or {}).items():
        _require_identifier(column)
        if isinstance(expected, Range):
            if expected.start is not None:
                clauses.append(f"`{column}` >= %s")
                params.append(expected.start)
            if expected.end is not None:
                clauses.append(f"`{column}` < %s")
                params.append(expected.end)
        elif expected is None:
            clauses.append(f"`{column}` IS NULL")
        else:
            clauses.append(f"`{column}` = %s")
            params.append(expected)

    sql = f"SELECT * FROM `{table}`"
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    return sql, tuple(params)


def _require_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name or ""):
        raise ValidationError(f"Invalid column or table name: {name!r}")
    return name


def _decode_row(row: dict) -> dict:
    out = dict(row)
    for column in out.keys() & JSON_COLUMNS:
        value = out[column]
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8")
        if isinstance(value, str):
            out[column] = json.loads(value) if value.strip() else {}
    return out
