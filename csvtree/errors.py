"""Exceptions raised while reconstructing a tree from indented rows."""

from __future__ import annotations

from typing import Optional


class CsvTreeError(ValueError):
    """Base class for all conversion errors."""


class MalformedRowError(CsvTreeError):
    """A row does not carry the cells its indentation promises."""

    def __init__(self, message: str, row_index: Optional[int] = None) -> None:
        if row_index is not None:
            message = f"Row {row_index}: {message}"
        super().__init__(message)
        self.row_index = row_index


class InconsistentDepthError(CsvTreeError):
    """A record could not be attached to any parent."""

    def __init__(self, message: str, record_index: Optional[int] = None) -> None:
        if record_index is not None:
            message = f"Record {record_index}: {message}"
        super().__init__(message)
        self.record_index = record_index


class EmptyInputError(CsvTreeError):
    """No content rows were supplied, so there is no root record."""


__all__ = [
    "CsvTreeError",
    "EmptyInputError",
    "InconsistentDepthError",
    "MalformedRowError",
]
