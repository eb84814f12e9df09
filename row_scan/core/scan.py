"""Statement result scanning.

scan_all runs a prepared statement and stores every result row in a
MultiScannable, one new element per row. scan_one does the same for a
query expected to return at most one row. Both stop at the first error and
close the cursor exactly once, whatever happens after execute() returned.

Nothing is rolled back on error: rows scanned before the failure stay in
the destination, and so does the element allocated for the failing row.
"""

from __future__ import annotations

from typing import Any

from row_scan.adapters.protocol import (
    AsyncRowCursor,
    AsyncStatementExecutor,
    RowCursor,
    StatementExecutor,
)
from row_scan.core.exceptions import MultipleRowsError
from row_scan.mapping.protocol import MultiScannable, SingleScannable


def _note_close_failure(exc: BaseException, close_exc: Exception) -> None:
    exc.add_note(f"Closing the cursor also failed: {close_exc!r}")


def _close_after_failure(cursor: RowCursor, exc: BaseException) -> None:
    # A close failure must not replace the error already propagating
    try:
        cursor.close()
    except Exception as close_exc:
        _note_close_failure(exc, close_exc)


async def _close_after_failure_async(cursor: AsyncRowCursor, exc: BaseException) -> None:
    try:
        await cursor.close()
    except Exception as close_exc:
        _note_close_failure(exc, close_exc)


def _raise_deferred(cursor: RowCursor | AsyncRowCursor) -> None:
    err = cursor.err()
    if err is not None:
        raise err


def scan_all(statement: StatementExecutor, dst: MultiScannable, *args: Any) -> int:
    """Execute ``statement`` with ``args`` and store all result rows in ``dst``.

    For each row, ``dst.new_element()`` supplies a fresh record and the row is
    scanned into that record's ``scan_targets()``. Rows are handled strictly
    in the order the cursor delivers them.

    Example::

        @dataclass
        class Label:
            id: int = 0
            name: str = ""

            def scan_targets(self):
                return [AttrSlot(self, "id"), AttrSlot(self, "name")]

        labels = ScanList(Label)
        scan_all(get_labels_stmt, labels, some_id, some_other_param)

    Returns:
        The number of elements allocated in ``dst``.

    Raises:
        Whatever ``statement.execute``, ``dst.new_element``, the record's
        ``scan_targets`` or ``cursor.scan`` raise, and the error reported by
        ``cursor.err()`` after the last row. None of them are wrapped.
    """
    cursor = statement.execute(*args)
    count = 0
    try:
        while cursor.next():
            element = dst.new_element()
            count += 1
            cursor.scan(element.scan_targets())
        _raise_deferred(cursor)
    except BaseException as exc:
        _close_after_failure(cursor, exc)
        raise
    cursor.close()
    return count


def scan_one(statement: StatementExecutor, dst: SingleScannable, *args: Any) -> bool:
    """Execute ``statement`` and scan its only row into ``dst``.

    Returns:
        True if a row was scanned, False if the query returned no rows (in
        which case ``dst`` is untouched).

    Raises:
        MultipleRowsError: The query returned more than one row. ``dst``
            already holds the first row.
    """
    cursor = statement.execute(*args)
    try:
        found = cursor.next()
        if found:
            cursor.scan(dst.scan_targets())
            if cursor.next():
                raise MultipleRowsError()
        _raise_deferred(cursor)
    except BaseException as exc:
        _close_after_failure(cursor, exc)
        raise
    cursor.close()
    return found


async def scan_all_async(
    statement: AsyncStatementExecutor, dst: MultiScannable, *args: Any
) -> int:
    """Async variant of :func:`scan_all`."""
    cursor = await statement.execute(*args)
    count = 0
    try:
        while await cursor.next():
            element = dst.new_element()
            count += 1
            cursor.scan(element.scan_targets())
        _raise_deferred(cursor)
    except BaseException as exc:
        await _close_after_failure_async(cursor, exc)
        raise
    await cursor.close()
    return count


async def scan_one_async(
    statement: AsyncStatementExecutor, dst: SingleScannable, *args: Any
) -> bool:
    """Async variant of :func:`scan_one`."""
    cursor = await statement.execute(*args)
    try:
        found = await cursor.next()
        if found:
            cursor.scan(dst.scan_targets())
            if await cursor.next():
                raise MultipleRowsError()
        _raise_deferred(cursor)
    except BaseException as exc:
        await _close_after_failure_async(cursor, exc)
        raise
    await cursor.close()
    return found
