"""Scan targets.

A slot is an addressable location a cursor writes one column value into.
Record types list their slots explicitly and in column order; nothing here
inspects a record to discover its fields.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from row_scan.core.exceptions import ColumnCountError, ConversionError, ScanError

T = TypeVar("T")

Converter = Callable[[Any], Any]


@runtime_checkable
class Slot(Protocol):
    """Write target for a single column."""

    def set(self, value: Any) -> None:
        """Store one column value."""
        ...


class Ref(Generic[T]):
    """Standalone value holder.

    Useful for scalar queries and for records that are not attribute based::

        total = Ref(int)
        scan_one(count_stmt, SlotRow(total))
        total.value
    """

    __slots__ = ("_convert", "value")

    def __init__(self, convert: Converter | None = None, value: T | None = None) -> None:
        self._convert = convert
        self.value = value

    def set(self, value: Any) -> None:
        self.value = self._convert(value) if self._convert is not None else value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class AttrSlot:
    """Writes a column value to a named attribute of ``obj``."""

    __slots__ = ("_obj", "_name", "_convert")

    def __init__(self, obj: Any, name: str, convert: Converter | None = None) -> None:
        self._obj = obj
        self._name = name
        self._convert = convert

    @property
    def name(self) -> str:
        return self._name

    def set(self, value: Any) -> None:
        if self._convert is not None:
            value = self._convert(value)
        setattr(self._obj, self._name, value)

    def __repr__(self) -> str:
        return f"AttrSlot({type(self._obj).__name__}.{self._name})"


class ItemSlot:
    """Writes a column value to ``container[key]``."""

    __slots__ = ("_container", "_key", "_convert")

    def __init__(
        self,
        container: MutableMapping[Any, Any] | list[Any],
        key: Any,
        convert: Converter | None = None,
    ) -> None:
        self._container = container
        self._key = key
        self._convert = convert

    def set(self, value: Any) -> None:
        if self._convert is not None:
            value = self._convert(value)
        self._container[self._key] = value

    def __repr__(self) -> str:
        return f"ItemSlot({self._key!r})"


def attrs(obj: Any, *names: str, **converters: Converter) -> list[AttrSlot]:
    """Build AttrSlots for ``names`` in the order given.

    Keyword arguments attach a converter to the attribute of the same name::

        def scan_targets(self):
            return attrs(self, "id", "name", "created_at", created_at=parse_ts)
    """
    unknown = set(converters) - set(names)
    if unknown:
        raise ValueError(f"Converters given for unlisted attributes: {sorted(unknown)}")
    return [AttrSlot(obj, name, converters.get(name)) for name in names]


def _row_values(row: Any) -> Sequence[Any]:
    # Dict-like rows (psycopg dict_row, aiomysql DictCursor) keep column order
    if isinstance(row, Mapping):
        return list(row.values())
    return tuple(row)


def assign_row(row: Any, targets: Sequence[Any]) -> None:
    """Write each column of ``row`` into the target at the same position.

    Raises:
        ColumnCountError: The row and the target list differ in length.
        ScanError: A target does not implement the Slot protocol.
        ConversionError: A target rejected its value or could not be
            written, e.g. an attribute of a frozen dataclass.
    """
    values = _row_values(row)
    targets = list(targets)
    if len(values) != len(targets):
        raise ColumnCountError(len(targets), len(values))

    for index, (target, value) in enumerate(zip(targets, values, strict=True)):
        if not isinstance(target, Slot):
            raise ScanError(
                f"Scan target {index} ({type(target).__name__}) has no set() method"
            )
        try:
            target.set(value)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConversionError(index, f"{type(e).__name__}: {e}") from e
