from __future__ import annotations

import mysql.connector
import pytest


class FakeCursor:
    """Records statements; raises ``fail_with`` on statement number ``fail_on`` (1-based)."""

    def __init__(self, *, fail_on=None, fail_with=None, rows=None):
        self.statements: list[tuple[str, object]] = []
        self.fail_on = fail_on
        self.fail_with = fail_with or mysql.connector.Error(msg="boom")
        self.rows = list(rows or [])
        self.lastrowid = 7
        self.rowcount = 1
        self.closed = False

    def _run(self, sql, params):
        self.statements.append((" ".join(sql.split()), params))
        if self.fail_on is not None and len(self.statements) == self.fail_on:
            raise self.fail_with

    def execute(self, sql, params=None):
        self._run(sql, params)

    def executemany(self, sql, seq):
        self._run(sql, list(seq))

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def fetchall(self):
        out = list(self.rows)
        self.rows.clear()
        return out

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self.cur = cursor
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor | None = None, *, connect_error=None):
        self.conn = FakeConnection(cursor or FakeCursor())
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


@pytest.fixture
def make_db():
    """Build a fake connection factory; cursor options go to FakeCursor."""

    def _make(*, connect_error=None, **cursor_kwargs) -> FakeConnFactory:
        return FakeConnFactory(FakeCursor(**cursor_kwargs), connect_error=connect_error)

    return _make
