"""Statement, cursor and database adapter protocols.

scan_all and scan_one consume StatementExecutor/RowCursor (or their async
counterparts). Every driver module MUST implement SyncAdapter and
AsyncAdapter so that load_adapter() can hand out any of them
interchangeably.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from row_scan.core.connection import ConnectionConfig


@runtime_checkable
class RowCursor(Protocol):
    """Forward-only, single-pass view over one statement's result rows."""

    def next(self) -> bool:
        """Advance to the next row. Returns False once no row is available."""
        ...

    def scan(self, targets: Sequence[Any]) -> None:
        """Write the current row's columns into ``targets``, positionally."""
        ...

    def err(self) -> BaseException | None:
        """Return the fault that stopped iteration early, if any."""
        ...

    def close(self) -> None:
        """Release the cursor."""
        ...


@runtime_checkable
class StatementExecutor(Protocol):
    """A prepared statement that can be run with bind arguments."""

    def execute(self, *args: Any) -> RowCursor:
        """Run the statement. Raises ExecutionError if it cannot start."""
        ...


@runtime_checkable
class AsyncRowCursor(Protocol):
    """Async variant of RowCursor. scan() and err() work on buffered state."""

    async def next(self) -> bool:
        """Advance to the next row. Returns False once no row is available."""
        ...

    def scan(self, targets: Sequence[Any]) -> None:
        """Write the current row's columns into ``targets``, positionally."""
        ...

    def err(self) -> BaseException | None:
        """Return the fault that stopped iteration early, if any."""
        ...

    async def close(self) -> None:
        """Release the cursor."""
        ...


@runtime_checkable
class AsyncStatementExecutor(Protocol):
    """Async variant of StatementExecutor."""

    async def execute(self, *args: Any) -> AsyncRowCursor:
        """Run the statement. Raises ExecutionError if it cannot start."""
        ...


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """DB-API placeholder style the driver expects in SQL text."""
        ...

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a driver connection."""
        ...

    def prepare(self, connection: Any, sql: str) -> StatementExecutor:
        """Bind ``sql`` to ``connection`` as a reusable statement."""
        ...


@runtime_checkable
class AsyncAdapter(Protocol):
    """Asynchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """DB-API placeholder style the driver expects in SQL text."""
        ...

    async def connect_async(self, config: ConnectionConfig) -> Any:
        """Open an async driver connection."""
        ...

    def prepare(self, connection: Any, sql: str) -> AsyncStatementExecutor:
        """Bind ``sql`` to ``connection`` as a reusable async statement."""
        ...
