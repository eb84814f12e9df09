"""Unit tests for scan_all_async and scan_one_async."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import pytest

from row_scan.core.exceptions import (
    ColumnCountError,
    ConversionError,
    CursorCloseError,
    CursorError,
    ExecutionError,
    MultipleRowsError,
)
from row_scan.core.scan import scan_all_async, scan_one_async
from row_scan.core.slots import attrs
from row_scan.mapping.collection import ScanList


@dataclass
class Label:
    id: int = 0
    name: str = ""

    def scan_targets(self):
        return attrs(self, "id", "name")


ROWS = [(1, "bug"), (2, "feature"), (3, "docs")]


class TestScanAllAsync:
    async def test_scans_every_row_in_order(self, make_async_statement) -> None:
        stmt = make_async_statement(ROWS)
        labels = ScanList(Label)

        count = await scan_all_async(stmt, labels, 10)

        assert count == 3
        assert labels == [Label(1, "bug"), Label(2, "feature"), Label(3, "docs")]
        assert stmt.calls == [(10,)]
        assert stmt.cursors[0].close_calls == 1

    async def test_empty_result(self, make_async_statement) -> None:
        stmt = make_async_statement([])
        labels = ScanList(Label)

        assert await scan_all_async(stmt, labels) == 0
        assert labels == []
        assert stmt.cursors[0].close_calls == 1

    async def test_execution_error(self, make_async_statement) -> None:
        stmt = make_async_statement(execute_error=ExecutionError("down"))
        labels = ScanList(Label)

        with pytest.raises(ExecutionError):
            await scan_all_async(stmt, labels)

        assert labels == []
        assert stmt.cursors == []

    async def test_scan_error_keeps_partial_results(self, make_async_statement) -> None:
        stmt = make_async_statement([(1, "bug"), (2,), (3, "docs")])
        labels = ScanList(Label)

        with pytest.raises(ColumnCountError):
            await scan_all_async(stmt, labels)

        assert labels == [Label(1, "bug"), Label()]
        assert stmt.cursors[0].fetched == 2
        assert stmt.cursors[0].close_calls == 1

    async def test_terminal_error(self, make_async_statement) -> None:
        error = CursorError("stream reset")
        stmt = make_async_statement(ROWS[:2], terminal_error=error)
        labels = ScanList(Label)

        with pytest.raises(CursorError) as excinfo:
            await scan_all_async(stmt, labels)

        assert excinfo.value is error
        assert len(labels) == 2
        assert stmt.cursors[0].close_calls == 1

    async def test_close_error_does_not_mask_scan_error(self, make_async_statement) -> None:
        stmt = make_async_statement(
            [(1,)], close_error=CursorCloseError("socket gone")
        )

        with pytest.raises(ColumnCountError) as excinfo:
            await scan_all_async(stmt, ScanList(Label))

        assert any("Closing the cursor also failed" in n for n in excinfo.value.__notes__)

    async def test_cancellation_closes_cursor(self, make_async_statement) -> None:
        stmt = make_async_statement(ROWS, scan_errors={1: asyncio.CancelledError()})

        with pytest.raises(asyncio.CancelledError):
            await scan_all_async(stmt, ScanList(Label))

        assert stmt.cursors[0].close_calls == 1


class TestScanOneAsync:
    async def test_single_row(self, make_async_statement) -> None:
        label = Label()
        assert await scan_one_async(make_async_statement(ROWS[:1]), label) is True
        assert label == Label(1, "bug")

    async def test_no_rows(self, make_async_statement) -> None:
        stmt = make_async_statement([])
        assert await scan_one_async(stmt, Label()) is False
        assert stmt.cursors[0].close_calls == 1

    async def test_multiple_rows(self, make_async_statement) -> None:
        stmt = make_async_statement(ROWS)
        with pytest.raises(MultipleRowsError):
            await scan_one_async(stmt, Label())
        assert stmt.cursors[0].close_calls == 1

    async def test_close_error_does_not_mask_scan_error(self, make_async_statement) -> None:
        scan_error = ConversionError(1, "bad value")
        stmt = make_async_statement(
            ROWS[:1],
            scan_errors={0: scan_error},
            close_error=CursorCloseError("socket gone"),
        )

        with pytest.raises(ConversionError) as excinfo:
            await scan_one_async(stmt, Label())

        assert excinfo.value is scan_error
        assert any("Closing the cursor also failed" in n for n in excinfo.value.__notes__)
        assert stmt.cursors[0].close_calls == 1
