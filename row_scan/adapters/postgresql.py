"""PostgreSQL adapter - sync and async using psycopg (v3+).

Statements are executed with ``prepare=True`` so the server keeps the
parsed plan for the lifetime of the connection.
"""

from __future__ import annotations

from typing import Any

from row_scan.adapters.statement import AsyncDBAPIStatement, DBAPIStatement
from row_scan.core.connection import ConnectionConfig


def _build_conninfo(config: ConnectionConfig) -> str:
    """Build a libpq connection string from config fields."""
    parts: list[str] = []
    if config.host is not None:
        parts.append(f"host={config.host}")
    if config.port is not None:
        parts.append(f"port={config.port}")
    if config.user is not None:
        parts.append(f"user={config.user}")
    if config.password is not None:
        parts.append(f"password={config.password}")
    parts.append(f"dbname={config.database}")
    return " ".join(parts)


class PostgresqlStatement(DBAPIStatement):
    """Server-prepared psycopg statement. Placeholders: ``%s``."""

    def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        cursor.execute(self.sql, args, prepare=True)


class PostgresqlAsyncStatement(AsyncDBAPIStatement):
    """Server-prepared psycopg async statement. Placeholders: ``%s``."""

    async def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        await cursor.execute(self.sql, args, prepare=True)


class PostgresqlSyncAdapter:
    """Synchronous PostgreSQL adapter using psycopg (v3+)."""

    @property
    def paramstyle(self) -> str:
        return "format"

    def connect(self, config: ConnectionConfig) -> Any:
        import psycopg

        return psycopg.connect(_build_conninfo(config), **config.extra)

    def prepare(self, connection: Any, sql: str) -> PostgresqlStatement:
        return PostgresqlStatement(connection, sql)


class PostgresqlAsyncAdapter:
    """Asynchronous PostgreSQL adapter using psycopg (v3+) async support."""

    @property
    def paramstyle(self) -> str:
        return "format"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import psycopg

        return await psycopg.AsyncConnection.connect(_build_conninfo(config), **config.extra)

    def prepare(self, connection: Any, sql: str) -> PostgresqlAsyncStatement:
        return PostgresqlAsyncStatement(connection, sql)
