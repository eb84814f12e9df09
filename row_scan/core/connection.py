"""Connection configuration and adapter loading.

ConnectionConfig is a Pydantic model for type-safe connection config.
connect() and connect_async() open a single driver connection through the
adapter registered for the configured backend. Pooling is left to the
application.
"""

from __future__ import annotations

import importlib
from typing import Any

from pydantic import BaseModel, field_validator

from row_scan.core.enums import DatabaseBackend
from row_scan.core.exceptions import AdapterError, ConnectionError  # noqa: A004


class ConnectionConfig(BaseModel):
    """Configuration for database connections.

    ``extra`` is passed through to the driver's connect call as keyword
    arguments.
    """

    driver: DatabaseBackend
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str
    extra: dict[str, Any] = {}

    @field_validator("driver", mode="before")
    @classmethod
    def _lowercase_driver(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value


# Adapter module mapping: backend → (module_path, sync_class, async_class)
_ADAPTER_MAP: dict[DatabaseBackend, tuple[str, str, str]] = {
    DatabaseBackend.SQLITE: (
        "row_scan.adapters.sqlite",
        "SqliteSyncAdapter",
        "SqliteAsyncAdapter",
    ),
    DatabaseBackend.POSTGRESQL: (
        "row_scan.adapters.postgresql",
        "PostgresqlSyncAdapter",
        "PostgresqlAsyncAdapter",
    ),
    DatabaseBackend.MYSQL: ("row_scan.adapters.mysql", "MysqlSyncAdapter", "MysqlAsyncAdapter"),
    DatabaseBackend.ORACLE: (
        "row_scan.adapters.oracle",
        "OracleSyncAdapter",
        "OracleAsyncAdapter",
    ),
}


def load_adapter(driver: DatabaseBackend | str, kind: str = "sync") -> Any:
    """Load a sync or async adapter by driver name.

    Args:
        driver: Backend enum member or its name ("sqlite", "postgresql", ...).
        kind: "sync" or "async".

    Raises:
        AdapterError: Unknown driver or kind, or the adapter failed to import.
    """
    if kind not in ("sync", "async"):
        raise AdapterError(f"Unknown adapter kind: {kind!r} (expected 'sync' or 'async')")
    try:
        backend = DatabaseBackend(driver.lower() if isinstance(driver, str) else driver)
    except ValueError:
        raise AdapterError(f"Unsupported database driver: {driver}") from None

    module_path, sync_cls_name, async_cls_name = _ADAPTER_MAP[backend]
    cls_name = sync_cls_name if kind == "sync" else async_cls_name

    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load {kind} adapter for '{backend.value}': {e}") from e


def connect(config: ConnectionConfig) -> Any:
    """Open a synchronous driver connection described by ``config``."""
    adapter = load_adapter(config.driver, "sync")
    try:
        return adapter.connect(config)
    except ImportError as e:
        raise AdapterError(f"Driver for '{config.driver.value}' is not installed: {e}") from e
    except Exception as e:
        raise ConnectionError(f"Cannot connect to {config.driver.value} database: {e}") from e


async def connect_async(config: ConnectionConfig) -> Any:
    """Open an asynchronous driver connection described by ``config``."""
    adapter = load_adapter(config.driver, "async")
    try:
        return await adapter.connect_async(config)
    except ImportError as e:
        raise AdapterError(f"Driver for '{config.driver.value}' is not installed: {e}") from e
    except Exception as e:
        raise ConnectionError(f"Cannot connect to {config.driver.value} database: {e}") from e
