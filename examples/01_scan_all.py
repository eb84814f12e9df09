"""
Example 01: Scanning Rows Into Records

This example demonstrates scan_all, scan_one and ScanList against SQLite.
Each record type lists its own scan targets in column order.
"""

from dataclasses import dataclass

from row_scan import ConnectionConfig, Ref, ScanList, SlotRow, attrs, connect, load_adapter
from row_scan import scan_all, scan_one


@dataclass
class Label:
    id: int = 0
    name: str = ""

    def scan_targets(self):
        return attrs(self, "id", "name")


def main():
    config = ConnectionConfig(driver="sqlite", database=":memory:")
    conn = connect(config)
    conn.execute("CREATE TABLE labels (id INTEGER PRIMARY KEY, owner_id INTEGER, name TEXT)")
    conn.executemany(
        "INSERT INTO labels (id, owner_id, name) VALUES (?, ?, ?)",
        [(1, 10, "bug"), (2, 10, "feature"), (3, 20, "docs"), (4, 10, "wontfix")],
    )
    conn.commit()

    adapter = load_adapter(config.driver)
    by_owner = adapter.prepare(conn, "SELECT id, name FROM labels WHERE owner_id = ? ORDER BY id")
    count_all = adapter.prepare(conn, "SELECT COUNT(*) FROM labels")

    print("=== scan_all ===\n")

    # The same prepared statement can be run with different arguments
    for owner_id in (10, 20):
        labels = ScanList(Label)
        scan_all(by_owner, labels, owner_id)
        print(f"owner {owner_id}: {len(labels)} label(s)")
        for label in labels:
            print(f"  - #{label.id} {label.name}")
    print()

    print("=== scan_one ===\n")

    total = Ref()
    scan_one(count_all, SlotRow(total))
    print(f"Total labels: {total.value}")

    conn.close()


if __name__ == "__main__":
    main()
