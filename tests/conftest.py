"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Sequence
from typing import Any

import pytest

from row_scan.core.connection import ConnectionConfig
from row_scan.core.slots import assign_row


class FakeCursor:
    """In-memory RowCursor that records how it was driven.

    Args:
        rows: Rows to deliver, in order.
        scan_errors: Row index -> exception raised by scan() on that row.
        terminal_error: Returned by err() once the rows are exhausted.
        close_error: Raised by close().
    """

    def __init__(
        self,
        rows: Sequence[Sequence[Any]],
        scan_errors: dict[int, BaseException] | None = None,
        terminal_error: BaseException | None = None,
        close_error: BaseException | None = None,
    ) -> None:
        self._rows = list(rows)
        self._scan_errors = scan_errors or {}
        self._terminal_error = terminal_error
        self._close_error = close_error
        self._index = -1
        self.fetched = 0
        self.scanned: list[int] = []
        self.close_calls = 0

    def next(self) -> bool:
        if self._index + 1 >= len(self._rows):
            self._index = len(self._rows)
            return False
        self._index += 1
        self.fetched += 1
        return True

    def scan(self, targets: Sequence[Any]) -> None:
        self.scanned.append(self._index)
        if self._index in self._scan_errors:
            raise self._scan_errors[self._index]
        assign_row(self._rows[self._index], targets)

    def err(self) -> BaseException | None:
        if self._index >= len(self._rows):
            return self._terminal_error
        return None

    def close(self) -> None:
        self.close_calls += 1
        if self._close_error is not None:
            raise self._close_error


class FakeStatement:
    """StatementExecutor handing out one FakeCursor per execute() call."""

    def __init__(
        self,
        rows: Sequence[Sequence[Any]] = (),
        execute_error: BaseException | None = None,
        **cursor_options: Any,
    ) -> None:
        self._rows = rows
        self._execute_error = execute_error
        self._cursor_options = cursor_options
        self.calls: list[tuple[Any, ...]] = []
        self.cursors: list[FakeCursor] = []

    def execute(self, *args: Any) -> FakeCursor:
        self.calls.append(args)
        if self._execute_error is not None:
            raise self._execute_error
        cursor = FakeCursor(self._rows, **self._cursor_options)
        self.cursors.append(cursor)
        return cursor


class AsyncFakeCursor(FakeCursor):
    """AsyncRowCursor variant of FakeCursor."""

    async def next(self) -> bool:  # type: ignore[override]
        return FakeCursor.next(self)

    async def close(self) -> None:  # type: ignore[override]
        FakeCursor.close(self)


class AsyncFakeStatement(FakeStatement):
    """AsyncStatementExecutor handing out AsyncFakeCursors."""

    async def execute(self, *args: Any) -> AsyncFakeCursor:  # type: ignore[override]
        self.calls.append(args)
        if self._execute_error is not None:
            raise self._execute_error
        cursor = AsyncFakeCursor(self._rows, **self._cursor_options)
        self.cursors.append(cursor)
        return cursor


@pytest.fixture
def make_statement():
    """Factory for FakeStatement.

    Usage:
        stmt = make_statement([(1, "a"), (2, "b")], terminal_error=CursorError("x"))
    """
    return FakeStatement


@pytest.fixture
def make_async_statement():
    """Factory for AsyncFakeStatement."""
    return AsyncFakeStatement


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:")


@pytest.fixture
def labels_db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database with a populated labels table."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE labels (id INTEGER PRIMARY KEY, owner_id INTEGER, name TEXT)")
    conn.executemany(
        "INSERT INTO labels (id, owner_id, name) VALUES (?, ?, ?)",
        [(1, 10, "bug"), (2, 10, "feature"), (3, 20, "docs"), (4, 10, "wontfix")],
    )
    conn.commit()
    try:
        yield conn
    finally:
        conn.close()
