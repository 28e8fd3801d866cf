"""Group classified rows into records split at separator rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .classify import ClassifiedRow, Value
from .errors import MalformedRowError

logger = logging.getLogger(__name__)


@dataclass
class Record:
    """A block of consecutive content rows describing one tree node.

    ``depth`` comes from the first row merged into the record and
    ``children_label`` from the first row that declared children. The
    children label is also kept in ``values`` with a ``None`` placeholder so
    that the children are serialised where they were declared.
    """

    depth: Optional[int] = None
    children_label: str = ""
    values: Dict[str, Value] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.depth is None

    def merge(self, row: ClassifiedRow, strict: bool = False, row_index: Optional[int] = None) -> None:
        """Merge a content row into the record."""

        if self.depth is None:
            self.depth = row.depth

        if row.declares_children:
            if not self.children_label:
                self.children_label = row.label
            elif strict:
                raise MalformedRowError(
                    f"record already declares children '{self.children_label}', "
                    f"cannot also declare '{row.label}'",
                    row_index,
                )
            else:
                logger.warning(
                    "Row %s declares children '%s' but the record already uses '%s'; keeping the first",
                    row_index,
                    row.label,
                    self.children_label,
                )

        self.values[row.label] = row.value


def group_rows(classified: Sequence[ClassifiedRow], strict: bool = False) -> List[Record]:
    """Merge consecutive content rows into records.

    Every separator closes the current record, even an empty one, and the
    record open at the end of input is always emitted.
    """

    records: List[Record] = []
    current = Record()
    for index, row in enumerate(classified):
        if row.is_separator:
            records.append(current)
            current = Record()
            continue
        current.merge(row, strict=strict, row_index=index)
    records.append(current)

    logger.debug(
        "Grouped rows into %d records (%d empty)",
        len(records),
        sum(1 for record in records if record.is_empty),
    )
    return records


__all__ = ["Record", "group_rows"]
