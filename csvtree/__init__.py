"""csvtree core package.

Turns spreadsheet exports that encode a hierarchy through indentation (runs
of leading empty cells) into nested key/value trees.  Rows are classified,
grouped into records at blank separator rows, partitioned by depth into a
tree and finally stripped of bookkeeping so the result can be handed
straight to a JSON serialiser.
"""

from .classify import ClassifiedRow, classify_row, classify_rows
from .config import AppConfig, InputConfig, OutputConfig, TreeConfig, load_config
from .errors import (
    CsvTreeError,
    EmptyInputError,
    InconsistentDepthError,
    MalformedRowError,
)
from .grouping import Record, group_rows
from .io import load_rows, remove_source
from .pipeline import convert_file, convert_rows
from .reporting import export_tree, render_tree
from .tree import TreeBuilder, TreeNode, build_tree, finalize

__all__ = [
    "AppConfig",
    "ClassifiedRow",
    "CsvTreeError",
    "EmptyInputError",
    "InconsistentDepthError",
    "InputConfig",
    "MalformedRowError",
    "OutputConfig",
    "Record",
    "TreeBuilder",
    "TreeConfig",
    "TreeNode",
    "build_tree",
    "classify_row",
    "classify_rows",
    "convert_file",
    "convert_rows",
    "export_tree",
    "finalize",
    "group_rows",
    "load_config",
    "load_rows",
    "remove_source",
    "render_tree",
]
