from __future__ import annotations

from datetime import datetime

import pytest

from src.hrms.hrms.core.exceptions import ValidationError
from src.hrms.hrms.records.mysql_record_store import MySQLRecordStore, build_insert, build_select
from src.hrms.hrms.records.store import Range


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params):
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = FakeCursor(rows)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def test_build_select_with_equality_and_range():
    sql, params = build_select(
        "attendance_events",
        {"uid": "u1", "timestamp": Range(datetime(2026, 3, 2), datetime(2026, 3, 3))},
    )

    assert sql == "SELECT * FROM `attendance_events` WHERE `uid` = %s AND `timestamp` >= %s AND `timestamp` < %s"
    assert params == ("u1", datetime(2026, 3, 2), datetime(2026, 3, 3))


def test_build_select_without_filters():
    assert build_select("goals", None) == ("SELECT * FROM `goals`", ())


def test_query_decodes_json_columns():
    factory = FakeConnFactory([{"employeeId": "u1", "allowances": '{"hra": 5000}', "deductions": b"{}", "status": "pending"}])
    store = MySQLRecordStore(factory)

    rows = store.query("payroll", {"status": "pending"})

    assert rows == [{"employeeId": "u1", "allowances": {"hra": 5000}, "deductions": {}, "status": "pending"}]
    assert factory.cursor.executed == [("SELECT * FROM `payslips` WHERE `status` = %s", ("pending",))]
    assert factory.cursor.closed and factory.conn.committed and factory.conn.closed


def test_unknown_collection_and_unsafe_columns_are_rejected():
    store = MySQLRecordStore(FakeConnFactory([]))

    with pytest.raises(ValidationError):
        store.query("salaries")
    with pytest.raises(ValidationError):
        store.query("goals", {"status; DROP TABLE goals": "x"})


def test_build_insert_encodes_json_columns():
    sql, params = build_insert("payslips", {"employeeId": "u1", "allowances": {"hra": 5000}, "status": "pending"})

    assert sql == "INSERT INTO `payslips` (`employeeId`, `allowances`, `status`) VALUES (%s, %s, %s)"
    assert params == ("u1", '{"hra": 5000}', "pending")


def test_build_insert_rejects_bad_column_names():
    with pytest.raises(ValidationError):
        build_insert("goals", {"title; DROP TABLE goals": "x"})


def test_add_inserts_and_returns_the_new_row_id():
    factory = FakeConnFactory([])
    factory.cursor.lastrowid = 42
    store = MySQLRecordStore(factory)

    new_id = store.add("attendance", {"uid": "u1", "type": "in", "timestamp": datetime(2026, 3, 2, 9)})

    assert new_id == "42"
    assert factory.cursor.executed == [
        (
            "INSERT INTO `attendance_events` (`uid`, `type`, `timestamp`) VALUES (%s, %s, %s)",
            ("u1", "in", datetime(2026, 3, 2, 9)),
        )
    ]
    assert factory.conn.committed
