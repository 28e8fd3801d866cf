"""Utilities for exporting converted trees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import OutputConfig

logger = logging.getLogger(__name__)


def render_tree(tree: Dict[str, Any], output: Optional[OutputConfig] = None) -> str:
    """Serialise ``tree`` to a JSON string using the output settings."""

    output = output or OutputConfig()
    return json.dumps(tree, ensure_ascii=output.ensure_ascii, indent=output.indent)


def export_tree(tree: Dict[str, Any], output: OutputConfig) -> Optional[Path]:
    """Persist ``tree`` as JSON to the configured path.

    Returns ``None`` when no path is configured; callers then print
    :func:`render_tree` themselves.
    """

    if output.path is None:
        return None

    path = Path(output.path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing tree to %s", path)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(render_tree(tree, output))
        handle.write("\n")
    return path


__all__ = ["export_tree", "render_tree"]
