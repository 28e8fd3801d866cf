"""Reconstruct a nested tree from depth-annotated records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Set, Tuple

from .classify import Value
from .errors import EmptyInputError, InconsistentDepthError
from .grouping import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeNode:
    """Immutable node built from a single record."""

    values: Mapping[str, Value]
    depth: int
    children_label: str = ""
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children_label

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in pre-order."""

        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def as_dict(self) -> Dict[str, Any]:
        """Return the node as plain data without bookkeeping fields."""

        payload: Dict[str, Any] = {}
        for label, value in self.values.items():
            if self.children_label and label == self.children_label:
                payload[label] = [child.as_dict() for child in self.children]
            elif value is None:
                payload[label] = ""
            elif isinstance(value, list):
                payload[label] = list(value)
            else:
                payload[label] = value
        if self.children_label and self.children_label not in payload:
            payload[self.children_label] = [child.as_dict() for child in self.children]
        return payload


class TreeBuilder:
    """Partition a record sequence into nested nodes by depth.

    Each child of a record spans from its own index up to the next sibling
    at the same depth, or to the end of the parent's range for the last one.
    """

    def __init__(self, records: Sequence[Record], strict: bool = False) -> None:
        self.records = records
        self.strict = strict
        self._attached: Set[int] = set()

    def build(self, begin: int = 0, end: Optional[int] = None) -> TreeNode:
        if end is None:
            end = len(self.records)
        if not 0 <= begin < end <= len(self.records):
            raise IndexError(f"Invalid record range [{begin}, {end})")

        self._attached = set()
        node = self._build(begin, end)
        self._check_orphans(begin, end)
        return node

    def _build(self, begin: int, end: int) -> TreeNode:
        root = self.records[begin]
        self._attached.add(begin)
        if not root.children_label:
            return TreeNode(values=dict(root.values), depth=root.depth)

        child_depth = root.depth + 1
        starts = [
            index
            for index in range(begin + 1, end)
            if self.records[index].depth == child_depth
        ]
        stops = starts[1:] + [end]
        children = tuple(self._build(start, stop) for start, stop in zip(starts, stops))
        if not children:
            logger.debug(
                "Record %d declares '%s' but has no children at depth %d",
                begin,
                root.children_label,
                child_depth,
            )
        return TreeNode(
            values=dict(root.values),
            depth=root.depth,
            children_label=root.children_label,
            children=children,
        )

    def _check_orphans(self, begin: int, end: int) -> None:
        orphans = [
            index
            for index in range(begin, end)
            if index not in self._attached and not self.records[index].is_empty
        ]
        if not orphans:
            return
        if self.strict:
            record = self.records[orphans[0]]
            raise InconsistentDepthError(
                f"depth {record.depth} does not fit under any parent", orphans[0]
            )
        logger.warning(
            "Dropping %d record(s) that fit under no parent: %s",
            len(orphans),
            ", ".join(str(index) for index in orphans),
        )


def find_root(records: Sequence[Record]) -> int:
    """Return the index of the first record with content."""

    for index, record in enumerate(records):
        if not record.is_empty:
            return index
    raise EmptyInputError("Input contains no content rows")


def build_tree(
    records: Sequence[Record],
    begin: Optional[int] = None,
    end: Optional[int] = None,
    strict: bool = False,
) -> TreeNode:
    """Build the tree rooted at ``records[begin]`` over ``[begin, end)``.

    When ``begin`` is omitted the first non-empty record is used as root.
    """

    if begin is None:
        begin = find_root(records)
    builder = TreeBuilder(records, strict=strict)
    node = builder.build(begin, end)
    logger.debug("Built tree with %d nodes", sum(1 for _ in node.iter_nodes()))
    return node


def finalize(node: Any) -> Dict[str, Any]:
    """Strip bookkeeping from ``node`` and return plain nested data.

    Already finalised mappings are copied unchanged, so finalising twice is
    a no-op.
    """

    if isinstance(node, TreeNode):
        return node.as_dict()
    if isinstance(node, Mapping):
        return {label: _finalize_value(value) for label, value in node.items()}
    raise TypeError(f"Cannot finalize object of type {type(node).__name__}")


def _finalize_value(value: Any) -> Any:
    if isinstance(value, (TreeNode, Mapping)):
        return finalize(value)
    if isinstance(value, list):
        return [_finalize_value(item) for item in value]
    return value


__all__ = [
    "TreeBuilder",
    "TreeNode",
    "build_tree",
    "finalize",
    "find_root",
]
