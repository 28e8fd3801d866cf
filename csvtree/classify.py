"""Row classification: depth, separator detection and label/value pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .errors import MalformedRowError

logger = logging.getLogger(__name__)

Value = Union[str, List[str], None]


@dataclass
class ClassifiedRow:
    """Result of inspecting a single input row.

    Separator rows carry no depth, label or value. Content rows always carry a
    depth and a label; ``value`` is ``None`` when the row declares the
    children of its record instead of pairing the label with a value.
    """

    is_separator: bool
    depth: Optional[int] = None
    label: str = ""
    value: Value = None

    @property
    def declares_children(self) -> bool:
        return not self.is_separator and self.value is None


def is_separator(row: Sequence[str]) -> bool:
    """Return ``True`` if every cell of ``row`` is empty."""

    return all(cell == "" for cell in row)


def find_depth(row: Sequence[str]) -> int:
    """Return the index of the first non-empty cell of a content row."""

    for index, cell in enumerate(row):
        if cell != "":
            return index
    raise ValueError("Separator rows have no depth")


def split_value(cell: str) -> Union[str, List[str]]:
    """Split comma-separated cells into a list of stripped tokens."""

    if "," in cell:
        return [token.strip() for token in cell.split(",")]
    return cell


def classify_row(
    row: Sequence[str], strict: bool = False, row_index: Optional[int] = None
) -> ClassifiedRow:
    """Classify ``row`` as a separator or a labelled content row."""

    if is_separator(row):
        return ClassifiedRow(is_separator=True)

    depth = find_depth(row)
    label = row[depth]
    if depth + 1 >= len(row):
        if strict:
            raise MalformedRowError(
                f"label '{label}' at depth {depth} has no value cell", row_index
            )
        logger.warning("Row %s ends at its label '%s'", row_index, label)
        return ClassifiedRow(is_separator=False, depth=depth, label=label)

    cell = row[depth + 1]
    if cell == "":
        return ClassifiedRow(is_separator=False, depth=depth, label=label)
    return ClassifiedRow(
        is_separator=False, depth=depth, label=label, value=split_value(cell)
    )


def classify_rows(rows: Sequence[Sequence[str]], strict: bool = False) -> List[ClassifiedRow]:
    """Classify every row in order."""

    classified = [
        classify_row(row, strict=strict, row_index=index)
        for index, row in enumerate(rows)
    ]
    logger.debug(
        "Classified %d rows (%d separators)",
        len(classified),
        sum(1 for item in classified if item.is_separator),
    )
    return classified


__all__ = [
    "ClassifiedRow",
    "Value",
    "classify_row",
    "classify_rows",
    "find_depth",
    "is_separator",
    "split_value",
]
