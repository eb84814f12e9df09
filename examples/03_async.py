"""
Example 03: Async Scanning

This example demonstrates scan_all_async with aiosqlite.
Requires: pip install row-scan[sqlite-async]
"""

import asyncio
from dataclasses import dataclass

from row_scan import ConnectionConfig, ScanList, attrs, connect_async, load_adapter, scan_all_async


@dataclass
class Label:
    id: int = 0
    name: str = ""

    def scan_targets(self):
        return attrs(self, "id", "name")


async def main():
    config = ConnectionConfig(driver="sqlite", database=":memory:")
    conn = await connect_async(config)
    await conn.execute("CREATE TABLE labels (id INTEGER PRIMARY KEY, name TEXT)")
    await conn.executemany(
        "INSERT INTO labels (id, name) VALUES (?, ?)", [(1, "bug"), (2, "feature")]
    )
    await conn.commit()

    stmt = load_adapter(config.driver, "async").prepare(conn, "SELECT id, name FROM labels")
    labels = ScanList(Label)
    count = await scan_all_async(stmt, labels)

    print(f"Scanned {count} label(s): {labels}")
    await conn.close()


if __name__ == "__main__":
    asyncio.run(main())
