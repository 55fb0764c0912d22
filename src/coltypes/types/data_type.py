"""Column data type labels.

`DataType` is an open-set enumeration: six labels are predefined, but any
non-empty label is a valid data type. Labels keep the case they were created
with and compare ignoring case.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Tuple

from coltypes.core.exceptions import InvalidDataTypeError


def ignore_case_key(label: str) -> str:
    """Uppercase `label` one character at a time, for ordinal case-insensitive comparison.

    Characters whose uppercase form is longer than one character are kept
    as-is, so "Stra\u00dfe" and "STRASSE" stay distinct.
    """
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in label)


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class DataType:
    """Logical data type of a database column.

    Examples:
        >>> DataType("integer") == DataType.INTEGER
        True
        >>> str(DataType("integer"))
        'integer'
    """

    BOOLEAN: ClassVar["DataType"]
    DATE_TIME: ClassVar["DataType"]
    DECIMAL: ClassVar["DataType"]
    INTEGER: ClassVar["DataType"]
    TEXT: ClassVar["DataType"]
    VAR_CHAR: ClassVar["DataType"]

    value: str
    _key: str = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidDataTypeError(label=self.value)
        object.__setattr__(self, "_key", ignore_case_key(self.value))

    @classmethod
    def of(cls, label: str) -> "DataType":
        """Return the predefined instance for `label`, or a new one for an extension label."""
        if isinstance(label, str) and label:
            predefined = PREDEFINED_DATA_TYPES.get(ignore_case_key(label))
            if predefined is not None:
                return predefined
        return cls(label)

    @property
    def is_predefined(self) -> bool:
        return self._key in PREDEFINED_DATA_TYPES

    def equals(self, other: Optional["DataType"]) -> bool:
        if other is None or not isinstance(other, DataType):
            return False
        if other is self:
            return True
        return self._key == other._key

    def compare_to(self, other: Optional["DataType"]) -> int:
        """Compare labels ignoring case; a missing `other` sorts first."""
        if other is None:
            return 1
        if other is self:
            return 0
        if not isinstance(other, DataType):
            raise TypeError(f"Cannot compare DataType with {type(other).__name__}")
        return (self._key > other._key) - (self._key < other._key)

    @staticmethod
    def sort_key(data_type: Optional["DataType"]) -> Tuple[int, str]:
        if data_type is None:
            return (0, "")
        return (1, data_type._key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DataType):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DataType):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DataType({self.value!r})"


BOOLEAN = DataType("Boolean")
DATE_TIME = DataType("DateTime")
DECIMAL = DataType("Decimal")
INTEGER = DataType("Integer")
TEXT = DataType("Text")
VAR_CHAR = DataType("VarChar")

DataType.BOOLEAN = BOOLEAN
DataType.DATE_TIME = DATE_TIME
DataType.DECIMAL = DECIMAL
DataType.INTEGER = INTEGER
DataType.TEXT = TEXT
DataType.VAR_CHAR = VAR_CHAR

PREDEFINED_DATA_TYPES: Mapping[str, DataType] = MappingProxyType(
    {dt._key: dt for dt in (BOOLEAN, DATE_TIME, DECIMAL, INTEGER, TEXT, VAR_CHAR)}
)
