"""MySQL adapter - sync (mysql-connector-python) and async (aiomysql)."""

from __future__ import annotations

from typing import Any

from row_scan.adapters.statement import AsyncDBAPIStatement, DBAPIStatement
from row_scan.core.connection import ConnectionConfig


class MysqlStatement(DBAPIStatement):
    """Statement run through a mysql-connector prepared cursor.

    Placeholders: ``%s`` or ``?``.
    """

    def _open_cursor(self) -> Any:
        return self._connection.cursor(prepared=True)


class MysqlAsyncStatement(AsyncDBAPIStatement):
    """Statement bound to an aiomysql connection. Placeholders: ``%s``."""


class MysqlSyncAdapter:
    """Synchronous MySQL adapter using mysql-connector-python."""

    @property
    def paramstyle(self) -> str:
        return "format"

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a MySQL connection."""
        import mysql.connector

        return mysql.connector.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            **config.extra,
        )

    def prepare(self, connection: Any, sql: str) -> MysqlStatement:
        return MysqlStatement(connection, sql)


class MysqlAsyncAdapter:
    """Asynchronous MySQL adapter using aiomysql."""

    @property
    def paramstyle(self) -> str:
        return "format"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        """Open an async MySQL connection."""
        import aiomysql

        return await aiomysql.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            db=config.database,
            **config.extra,
        )

    def prepare(self, connection: Any, sql: str) -> MysqlAsyncStatement:
        return MysqlAsyncStatement(connection, sql)
