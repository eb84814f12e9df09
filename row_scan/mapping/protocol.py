"""Scannable protocols.

A record type opts into scanning by listing its own scan targets; a
collection type opts in by growing itself one record per row. scan_all
and scan_one only ever talk to these two methods.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SingleScannable(Protocol):
    """Object a single row can be scanned into."""

    def scan_targets(self) -> Sequence[Any]:
        """Return one Slot per result column, in column order.

        The list is passed to the cursor's scan() as-is, so its length and
        order must match the query's select list.
        """
        ...


@runtime_checkable
class MultiScannable(Protocol):
    """Object any number of rows can be scanned into."""

    def new_element(self) -> SingleScannable:
        """Create a record, add it to the collection and return it.

        Called once per row before that row is scanned. Must return a new
        record on every call.
        """
        ...
