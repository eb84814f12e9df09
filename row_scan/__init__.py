"""RowScan - scan prepared statement results into caller-defined records."""

from __future__ import annotations

from row_scan.adapters.protocol import (
    AsyncAdapter,
    AsyncRowCursor,
    AsyncStatementExecutor,
    RowCursor,
    StatementExecutor,
    SyncAdapter,
)
from row_scan.adapters.statement import (
    AsyncDBAPIRowCursor,
    AsyncDBAPIStatement,
    DBAPIRowCursor,
    DBAPIStatement,
)
from row_scan.core.connection import ConnectionConfig, connect, connect_async, load_adapter
from row_scan.core.enums import DatabaseBackend
from row_scan.core.exceptions import (
    AdapterError,
    ColumnCountError,
    ConnectionError,  # noqa: A004
    ConversionError,
    CursorCloseError,
    CursorError,
    ExecutionError,
    MultipleRowsError,
    RowScanError,
    ScanError,
)
from row_scan.core.scan import scan_all, scan_all_async, scan_one, scan_one_async
from row_scan.core.slots import AttrSlot, ItemSlot, Ref, Slot, assign_row, attrs
from row_scan.mapping.collection import ScanList, SlotRow
from row_scan.mapping.protocol import MultiScannable, SingleScannable

__all__ = [
    # Scanning
    "scan_all",
    "scan_one",
    "scan_all_async",
    "scan_one_async",
    # Scannables
    "SingleScannable",
    "MultiScannable",
    "ScanList",
    "SlotRow",
    # Slots
    "Slot",
    "Ref",
    "AttrSlot",
    "ItemSlot",
    "attrs",
    "assign_row",
    # Statements and cursors
    "StatementExecutor",
    "RowCursor",
    "AsyncStatementExecutor",
    "AsyncRowCursor",
    "DBAPIStatement",
    "DBAPIRowCursor",
    "AsyncDBAPIStatement",
    "AsyncDBAPIRowCursor",
    # Adapters and connections
    "SyncAdapter",
    "AsyncAdapter",
    "ConnectionConfig",
    "DatabaseBackend",
    "load_adapter",
    "connect",
    "connect_async",
    # Exceptions
    "RowScanError",
    "ExecutionError",
    "ScanError",
    "ColumnCountError",
    "ConversionError",
    "MultipleRowsError",
    "CursorError",
    "CursorCloseError",
    "AdapterError",
    "ConnectionError",
]
