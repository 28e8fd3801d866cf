"""Command line interface for converting indented spreadsheets to JSON trees."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import AppConfig, load_config
from .errors import CsvTreeError
from .io import load_rows, remove_source
from .pipeline import convert_rows
from .reporting import export_tree, render_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an indentation-encoded spreadsheet export into a JSON tree"
    )
    parser.add_argument("input", type=Path, help="CSV or Excel file to convert")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON to this file instead of stdout")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on short rows, duplicate children declarations and orphaned records",
    )
    parser.add_argument("--skip-rows", type=int, help="Number of leading rows to ignore (e.g. a header)")
    parser.add_argument("--delimiter", help="CSV field delimiter")
    parser.add_argument("--sheet", help="Worksheet name for Excel inputs")
    parser.add_argument("--consume", action="store_true", help="Delete the input file after a successful conversion")
    parser.add_argument("--indent", type=int, help="JSON indentation (negative for compact output)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING)")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else AppConfig()
        _apply_overrides(config, args)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    input_path = _resolve_override_path(args.input)
    try:
        rows = load_rows(input_path, config.input)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read %s: %s", input_path, exc)
        return 1

    try:
        tree = convert_rows(rows, strict=config.tree.strict)
    except CsvTreeError as exc:
        logger.error("Conversion of %s failed: %s", input_path, exc)
        return 1

    try:
        written = export_tree(tree, config.output)
    except OSError as exc:
        logger.exception("Failed to write tree: %s", exc)
        return 1

    if written is None:
        print(render_tree(tree, config.output))

    if config.input.consume:
        try:
            remove_source(input_path)
        except OSError as exc:
            logger.error("Failed to remove %s: %s", input_path, exc)
            return 1

    return 0


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    if args.output:
        config.output.path = _resolve_override_path(args.output)

    if args.strict:
        config.tree.strict = True

    if args.skip_rows is not None:
        if args.skip_rows < 0:
            raise ValueError("--skip-rows must not be negative")
        config.input.skip_rows = args.skip_rows

    if args.delimiter:
        if len(args.delimiter) != 1:
            raise ValueError("--delimiter must be a single character")
        config.input.delimiter = args.delimiter

    if args.sheet:
        config.input.sheet = args.sheet

    if args.consume:
        config.input.consume = True

    if args.indent is not None:
        config.output.indent = args.indent if args.indent >= 0 else None


def _resolve_override_path(path: Path) -> Path:
    path = Path(path).expanduser()
    if path.is_absolute():
        return path
    return (Path.cwd() / path).resolve()


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    raise SystemExit(main())
