"""
Example 02: Errors and Partial Results

scan_all stops at the first failing row. Rows scanned before the failure
stay in the destination, together with the element allocated for the row
that failed. The cursor is closed on every path.
"""

from dataclasses import dataclass
from datetime import date

from row_scan import (
    ColumnCountError,
    ConnectionConfig,
    ConversionError,
    ExecutionError,
    ScanList,
    attrs,
    connect,
    load_adapter,
    scan_all,
)


@dataclass
class Release:
    version: str = ""
    shipped: date | None = None

    def scan_targets(self):
        return attrs(self, "version", "shipped", shipped=date.fromisoformat)


def main():
    config = ConnectionConfig(driver="sqlite", database=":memory:")
    conn = connect(config)
    conn.execute("CREATE TABLE releases (version TEXT PRIMARY KEY, shipped TEXT)")
    conn.executemany(
        "INSERT INTO releases VALUES (?, ?)",
        [("1.0", "2023-05-01"), ("1.1", "2023-09-14"), ("2.0", "someday"), ("2.1", None)],
    )
    conn.commit()
    adapter = load_adapter(config.driver)

    print("=== Conversion failure ===\n")
    releases = ScanList(Release)
    try:
        stmt = adapter.prepare(conn, "SELECT version, shipped FROM releases ORDER BY version")
        scan_all(stmt, releases)
    except ConversionError as e:
        print(f"Stopped: {e}")
    for release in releases:
        print(f"  - {release}")
    print()

    print("=== Column count mismatch ===\n")
    try:
        stmt = adapter.prepare(conn, "SELECT version, shipped, 1 FROM releases")
        scan_all(stmt, ScanList(Release))
    except ColumnCountError as e:
        print(f"Stopped: {e}\n")

    print("=== Execution failure ===\n")
    try:
        scan_all(adapter.prepare(conn, "SELECT version FROM missing"), ScanList(Release))
    except ExecutionError as e:
        print(f"Stopped: {e}")
        print(f"Driver error: {e.__cause__!r}")

    conn.close()


if __name__ == "__main__":
    main()
