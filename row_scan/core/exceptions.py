"""RowScan exception hierarchy.

All exceptions are RowScan-specific. Adapters chain raw driver exceptions
as ``__cause__``; they never raise them bare.
"""

from __future__ import annotations


class RowScanError(Exception):
    """Base exception for all RowScan errors."""


# --- Execution ---


class ExecutionError(RowScanError):
    """Raised when a statement cannot be started."""

    def __init__(self, detail: str, sql: str | None = None) -> None:
        self.detail = detail
        self.sql = sql
        if sql is None:
            super().__init__(f"Statement execution failed: {detail}")
        else:
            super().__init__(f"Statement execution failed for {sql!r}: {detail}")


# --- Scan ---


class ScanError(RowScanError):
    """Raised when the current row cannot be bound into its targets."""


class ColumnCountError(ScanError):
    """Raised when a row has a different number of columns than targets."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} scan targets, row has {actual} columns")


class ConversionError(ScanError):
    """Raised when a column value cannot be written into its target."""

    def __init__(self, column_index: int, detail: str) -> None:
        self.column_index = column_index
        super().__init__(f"Cannot scan column {column_index}: {detail}")


class MultipleRowsError(RowScanError):
    """Raised when scan_one encounters more than one row."""

    def __init__(self) -> None:
        super().__init__("scan_one: query returned more than one row (expected 0 or 1)")


# --- Cursor ---


class CursorError(RowScanError):
    """Raised for faults a cursor reports after row iteration stops."""


class CursorCloseError(CursorError):
    """Raised when releasing a cursor fails."""


# --- Adapter ---


class AdapterError(RowScanError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""
