"""SQLite adapter - sync (sqlite3 stdlib) and async (aiosqlite).

sqlite3 has no explicit prepare call; it keeps compiled statements in a
per-connection cache keyed by SQL text, so a statement reused through the
same DBAPIStatement is compiled once. Size the cache with
``extra={"cached_statements": N}``.
"""

from __future__ import annotations

import sqlite3
from typing import Any

from row_scan.adapters.statement import AsyncDBAPIStatement, DBAPIStatement
from row_scan.core.connection import ConnectionConfig


class SqliteStatement(DBAPIStatement):
    """Statement bound to a sqlite3 connection. Placeholders: ``?``."""


class SqliteAsyncStatement(AsyncDBAPIStatement):
    """Statement bound to an aiosqlite connection. Placeholders: ``?``."""


class SqliteSyncAdapter:
    """Synchronous SQLite adapter using stdlib sqlite3."""

    @property
    def paramstyle(self) -> str:
        return "qmark"

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        """Open a sqlite3 connection to ``config.database``."""
        return sqlite3.connect(config.database, **config.extra)

    def prepare(self, connection: sqlite3.Connection, sql: str) -> SqliteStatement:
        return SqliteStatement(connection, sql)


class SqliteAsyncAdapter:
    """Asynchronous SQLite adapter using aiosqlite."""

    @property
    def paramstyle(self) -> str:
        return "qmark"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        """Open an aiosqlite connection to ``config.database``."""
        import aiosqlite

        return await aiosqlite.connect(config.database, **config.extra)

    def prepare(self, connection: Any, sql: str) -> SqliteAsyncStatement:
        return SqliteAsyncStatement(connection, sql)
