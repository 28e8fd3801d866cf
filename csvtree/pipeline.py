"""End-to-end conversion of indented rows into a nested tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .classify import classify_rows
from .config import AppConfig
from .errors import EmptyInputError
from .grouping import group_rows
from .io import load_rows, remove_source
from .tree import build_tree, finalize

logger = logging.getLogger(__name__)


def convert_rows(rows: Sequence[Sequence[str]], strict: bool = False) -> Dict[str, Any]:
    """Convert indentation-encoded rows into a nested tree of plain data.

    Raises :class:`EmptyInputError` when ``rows`` holds no content rows.
    """

    if not rows:
        raise EmptyInputError("No rows supplied")

    classified = classify_rows(rows, strict=strict)
    records = group_rows(classified, strict=strict)
    root = build_tree(records, strict=strict)
    logger.debug(
        "Converted %d rows into %d records under root '%s'",
        len(rows),
        len(records),
        next(iter(root.values), ""),
    )
    return finalize(root)


def convert_file(path: Path, config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """Load ``path`` and convert it; removes the source if configured to."""

    config = config or AppConfig()
    rows = load_rows(path, config.input)
    tree = convert_rows(rows, strict=config.tree.strict)
    if config.input.consume:
        remove_source(path)
    return tree


__all__ = ["convert_file", "convert_rows"]
