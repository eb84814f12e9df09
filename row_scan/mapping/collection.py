"""Ready-made scannable containers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from row_scan.mapping.protocol import SingleScannable

T = TypeVar("T", bound=SingleScannable)


class ScanList(list[T], Generic[T]):
    """List that grows by one ``factory()`` record per scanned row.

    Example::

        @dataclass
        class Label:
            id: int = 0
            name: str = ""

            def scan_targets(self):
                return attrs(self, "id", "name")

        labels = ScanList(Label)
        scan_all(stmt, labels, some_id)
    """

    def __init__(self, factory: Callable[[], T], iterable: Iterable[T] = ()) -> None:
        super().__init__(iterable)
        self._factory = factory

    def new_element(self) -> T:
        element = self._factory()
        self.append(element)
        return element

    def __repr__(self) -> str:
        return f"ScanList({list.__repr__(self)})"


class SlotRow:
    """Scannable built from an explicit list of slots.

    For one-off queries where defining a record type is overkill::

        user_id, name = Ref(), Ref()
        scan_one(stmt, SlotRow(user_id, name), 42)
    """

    __slots__ = ("_targets",)

    def __init__(self, *targets: Any) -> None:
        self._targets = targets

    def scan_targets(self) -> Sequence[Any]:
        return self._targets
