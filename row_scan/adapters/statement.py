"""DB-API (PEP 249) statement and cursor wrappers.

DBAPIStatement turns a connection plus SQL text into a StatementExecutor;
DBAPIRowCursor exposes a driver cursor through the RowCursor protocol.
Driver modules subclass the statements to switch on their own preparation
support. The async classes cover drivers whose cursor methods return
awaitables (aiosqlite, psycopg async, aiomysql, oracledb async).
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import Any

from row_scan.core.exceptions import CursorCloseError, CursorError, ExecutionError, ScanError
from row_scan.core.slots import assign_row

logger = logging.getLogger(__name__)


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class _CursorState:
    """Row/error/closed bookkeeping shared by the sync and async cursors."""

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor
        self._row: Any = None
        self._err: CursorError | None = None
        self._done = False
        self._closed = False

    @property
    def raw(self) -> Any:
        """The wrapped driver cursor."""
        return self._cursor

    @property
    def closed(self) -> bool:
        return self._closed

    def _can_advance(self) -> bool:
        return not (self._closed or self._done)

    def _accept(self, row: Any) -> bool:
        if row is None:
            self._row = None
            self._done = True
            return False
        self._row = row
        return True

    def _fail(self, e: Exception) -> bool:
        error = CursorError(f"Fetching next row failed: {e}")
        error.__cause__ = e
        self._err = error
        self._row = None
        self._done = True
        return False

    def scan(self, targets: Sequence[Any]) -> None:
        if self._closed:
            raise ScanError("scan() called on a closed cursor")
        if self._row is None:
            raise ScanError("scan() called without a current row; call next() first")
        assign_row(self._row, targets)

    def err(self) -> CursorError | None:
        return self._err


class DBAPIRowCursor(_CursorState):
    """RowCursor over a synchronous PEP 249 cursor."""

    def next(self) -> bool:
        if not self._can_advance():
            return False
        try:
            row = self._cursor.fetchone()
        except Exception as e:
            return self._fail(e)
        return self._accept(row)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._row = None
        logger.debug("Closing cursor %r", self._cursor)
        try:
            self._cursor.close()
        except Exception as e:
            raise CursorCloseError(f"Closing cursor failed: {e}") from e


class AsyncDBAPIRowCursor(_CursorState):
    """AsyncRowCursor over a driver cursor with awaitable fetch/close."""

    async def next(self) -> bool:
        if not self._can_advance():
            return False
        try:
            row = await _maybe_await(self._cursor.fetchone())
        except Exception as e:
            return self._fail(e)
        return self._accept(row)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._row = None
        logger.debug("Closing cursor %r", self._cursor)
        try:
            await _maybe_await(self._cursor.close())
        except Exception as e:
            raise CursorCloseError(f"Closing cursor failed: {e}") from e


def _execution_error(
    sql: str, e: Exception, cursor: Any, close_exc: Exception | None
) -> ExecutionError:
    error = ExecutionError(str(e), sql)
    if close_exc is not None:
        error.add_note(f"Closing the failed cursor {cursor!r} also failed: {close_exc!r}")
    return error


class DBAPIStatement:
    """StatementExecutor over a synchronous DB-API connection.

    Args:
        connection: Open DB-API connection.
        sql: Statement text in the driver's own placeholder style.
    """

    def __init__(self, connection: Any, sql: str) -> None:
        self._connection = connection
        self.sql = sql

    def _open_cursor(self) -> Any:
        return self._connection.cursor()

    def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        cursor.execute(self.sql, args)

    def execute(self, *args: Any) -> DBAPIRowCursor:
        """Run the statement and wrap the driver cursor.

        Raises:
            ExecutionError: The driver refused to open a cursor or to run the
                statement. The driver exception is chained as ``__cause__``.
        """
        logger.debug("Executing %r with %d argument(s)", self.sql, len(args))
        try:
            cursor = self._open_cursor()
        except Exception as e:
            raise ExecutionError(str(e), self.sql) from e

        try:
            self._run(cursor, args)
        except Exception as e:
            close_exc: Exception | None = None
            try:
                cursor.close()
            except Exception as ce:
                close_exc = ce
            raise _execution_error(self.sql, e, cursor, close_exc) from e

        return DBAPIRowCursor(cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r})"


class AsyncDBAPIStatement:
    """AsyncStatementExecutor over an async DB-API style connection.

    Args:
        connection: Open async driver connection.
        sql: Statement text in the driver's own placeholder style.
    """

    def __init__(self, connection: Any, sql: str) -> None:
        self._connection = connection
        self.sql = sql

    async def _open_cursor(self) -> Any:
        return await _maybe_await(self._connection.cursor())

    async def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        await _maybe_await(cursor.execute(self.sql, args))

    async def execute(self, *args: Any) -> AsyncDBAPIRowCursor:
        """Run the statement and wrap the driver cursor.

        Raises:
            ExecutionError: The driver refused to open a cursor or to run the
                statement. The driver exception is chained as ``__cause__``.
        """
        logger.debug("Executing %r with %d argument(s)", self.sql, len(args))
        try:
            cursor = await self._open_cursor()
        except Exception as e:
            raise ExecutionError(str(e), self.sql) from e

        try:
            await self._run(cursor, args)
        except Exception as e:
            close_exc: Exception | None = None
            try:
                await _maybe_await(cursor.close())
            except Exception as ce:
                close_exc = ce
            raise _execution_error(self.sql, e, cursor, close_exc) from e

        return AsyncDBAPIRowCursor(cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r})"
