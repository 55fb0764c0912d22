"""
Custom exception classes for coltypes.

Provides structured error handling for the column data type value and the
column descriptors built on top of it.
"""

from typing import Any, Dict, Optional


class ColtypesException(Exception):
    """Base exception class for all coltypes exceptions."""

    pass


class InvalidDataTypeError(ColtypesException, ValueError):
    """
    Raised when a data type label is empty, missing or not a string.

    Subclasses ValueError so callers treating it as an invalid-argument
    condition keep working.

    Example:
        >>> raise InvalidDataTypeError(label="")
    """

    def __init__(self, label: Any = None, reason: str = "data type label must be a non-empty string"):
        self.label = label
        self.reason = reason
        super().__init__(f"{reason} (got {label!r})")


class ColumnSpecError(ColtypesException):
    """
    Raised when a column document cannot be loaded into a TableColumn.

    Can carry context about which entry failed:
        >>> raise ColumnSpecError(
        ...     reason="Duplicate attribute_name",
        ...     details={"index": 3, "attribute_name": "Id"}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)
