"""Oracle adapter - sync and async using oracledb."""

from __future__ import annotations

from typing import Any

from row_scan.adapters.statement import AsyncDBAPIStatement, DBAPIStatement
from row_scan.core.connection import ConnectionConfig


def _build_dsn(config: ConnectionConfig) -> str:
    """Build an Oracle Easy Connect string (host[:port]/database).

    Without a host, ``database`` is passed through as a TNS alias or a
    complete connect string.
    """
    if config.host is None:
        return config.database
    if config.port is None:
        return f"{config.host}/{config.database}"
    return f"{config.host}:{config.port}/{config.database}"


class OracleStatement(DBAPIStatement):
    """Statement prepared on its oracledb cursor. Placeholders: ``:1``, ``:2``..."""

    def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        cursor.prepare(self.sql)
        cursor.execute(None, list(args))


class OracleAsyncStatement(AsyncDBAPIStatement):
    """Statement prepared on its oracledb async cursor."""

    async def _run(self, cursor: Any, args: tuple[Any, ...]) -> None:
        cursor.prepare(self.sql)
        await cursor.execute(None, list(args))


class OracleSyncAdapter:
    """Synchronous Oracle adapter using oracledb."""

    @property
    def paramstyle(self) -> str:
        return "numeric"

    def connect(self, config: ConnectionConfig) -> Any:
        import oracledb

        return oracledb.connect(
            user=config.user, password=config.password, dsn=_build_dsn(config), **config.extra
        )

    def prepare(self, connection: Any, sql: str) -> OracleStatement:
        return OracleStatement(connection, sql)


class OracleAsyncAdapter:
    """Asynchronous Oracle adapter using oracledb async support."""

    @property
    def paramstyle(self) -> str:
        return "numeric"

    async def connect_async(self, config: ConnectionConfig) -> Any:
        import oracledb

        return await oracledb.connect_async(
            user=config.user, password=config.password, dsn=_build_dsn(config), **config.extra
        )

    def prepare(self, connection: Any, sql: str) -> OracleAsyncStatement:
        return OracleAsyncStatement(connection, sql)
