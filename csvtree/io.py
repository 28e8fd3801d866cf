"""IO helpers for reading indented spreadsheet exports into rows."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import InputConfig

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = {".csv", ".txt"}
EXCEL_EXTENSIONS = {".xlsx", ".xlsm"}


def load_rows(path: Path, config: Optional[InputConfig] = None) -> List[List[str]]:
    """Read ``path`` into a list of rows of stripped string cells."""

    config = config or InputConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file '{path}' does not exist")

    ext = path.suffix.lower()
    logger.info("Loading rows from %s", path)
    if ext in CSV_EXTENSIONS:
        frame = _load_csv(path, config)
    elif ext in EXCEL_EXTENSIONS:
        frame = _load_excel(path, config)
    else:
        raise ValueError(f"Unsupported file extension '{ext}' for input '{path}'")

    rows = frame_to_rows(frame)
    if config.skip_rows:
        logger.debug("Skipping %d leading row(s)", config.skip_rows)
        rows = rows[config.skip_rows :]
    logger.debug("Loaded %d rows of width %d", len(rows), frame.shape[1])
    return rows


def _load_csv(path: Path, config: InputConfig) -> pd.DataFrame:
    width = _csv_width(path, config)
    logger.debug("Reading CSV %s with delimiter %r and width %d", path, config.delimiter, width)
    if width == 0:
        return pd.DataFrame(dtype=str)
    return pd.read_csv(
        path,
        header=None,
        names=list(range(width)),
        dtype=str,
        sep=config.delimiter,
        encoding=config.encoding,
        keep_default_na=False,
        skip_blank_lines=False,
    )


def _csv_width(path: Path, config: InputConfig) -> int:
    """Return the cell count of the widest line; trimmed exports can be ragged."""

    with path.open("r", encoding=config.encoding, newline="") as handle:
        return max((len(row) for row in csv.reader(handle, delimiter=config.delimiter)), default=0)


def _load_excel(path: Path, config: InputConfig) -> pd.DataFrame:
    sheet = config.sheet if config.sheet is not None else 0
    logger.debug("Reading Excel %s sheet %s", path, sheet)
    return pd.read_excel(path, sheet_name=sheet, header=None, dtype=object)


def frame_to_rows(frame: pd.DataFrame) -> List[List[str]]:
    """Convert a raw frame into rows of stripped strings with no missing cells."""

    if frame.empty:
        return []
    cleaned = frame.fillna("").astype(str)
    cleaned = cleaned.apply(lambda column: column.str.strip())
    return [list(row) for row in cleaned.itertuples(index=False, name=None)]


def remove_source(path: Path) -> None:
    """Delete a consumed input file."""

    path = Path(path)
    logger.info("Removing consumed input %s", path)
    path.unlink()


__all__ = [
    "frame_to_rows",
    "load_rows",
    "remove_source",
]
