"""Mapping layer - scannable records and collections."""

from __future__ import annotations

from row_scan.mapping.collection import ScanList, SlotRow
from row_scan.mapping.protocol import MultiScannable, SingleScannable

__all__ = [
    "SingleScannable",
    "MultiScannable",
    "ScanList",
    "SlotRow",
]
