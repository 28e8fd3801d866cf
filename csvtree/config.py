"""Configuration loading utilities for csvtree."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import yaml

T = TypeVar("T")


@dataclass
class InputConfig:
    """How source files are read into rows."""

    delimiter: str = ","
    encoding: str = "utf-8"
    skip_rows: int = 0
    sheet: Optional[str] = None
    consume: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError("input.delimiter must be a single character")
        if int(self.skip_rows) < 0:
            raise ValueError("input.skip_rows must not be negative")
        self.skip_rows = int(self.skip_rows)


@dataclass
class TreeConfig:
    """Tweaks for the tree reconstruction."""

    strict: bool = False


@dataclass
class OutputConfig:
    """Where and how the resulting JSON tree is written."""

    path: Optional[Path] = None
    indent: Optional[int] = 2
    ensure_ascii: bool = False

    def resolved(self, base_path: Path) -> "OutputConfig":
        path = _resolve_path(self.path, base_path) if self.path is not None else None
        return OutputConfig(path=path, indent=self.indent, ensure_ascii=self.ensure_ascii)


@dataclass
class AppConfig:
    """Container for all configuration required by the CLI pipeline."""

    input: InputConfig = field(default_factory=InputConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def resolved(self, base_path: Path) -> "AppConfig":
        return AppConfig(
            input=self.input,
            tree=self.tree,
            output=self.output.resolved(base_path),
        )


def load_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from a YAML file."""

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file '{config_path}' does not exist")

    with config_path.open("r", encoding="utf-8") as stream:
        raw_config: Mapping[str, Any] = yaml.safe_load(stream) or {}

    if not isinstance(raw_config, Mapping):
        raise ValueError("Configuration root must be a mapping")

    unknown = set(raw_config) - {"input", "tree", "output"}
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    config = AppConfig(
        input=_parse_section(InputConfig, "input", raw_config.get("input")),
        tree=_parse_section(TreeConfig, "tree", raw_config.get("tree")),
        output=_parse_section(OutputConfig, "output", _parse_output_section(raw_config.get("output"))),
    )
    return config.resolved(config_path.parent)


def _parse_section(cls: Type[T], name: str, section: Optional[Mapping[str, Any]]) -> T:
    if section is None:
        return cls()
    if not isinstance(section, Mapping):
        raise ValueError(f"Configuration section '{name}' must be a mapping")

    allowed = {field_info.name for field_info in fields(cls)}
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(
            f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}"
        )
    return cls(**section)


def _parse_output_section(section: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not section:
        return None
    if not isinstance(section, Mapping):
        raise ValueError("Configuration section 'output' must be a mapping")
    parsed: Dict[str, Any] = dict(section)
    if parsed.get("path"):
        parsed["path"] = Path(parsed["path"])
    else:
        parsed["path"] = None
    return parsed


def _resolve_path(path: Path, base_path: Path) -> Path:
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_path / expanded).resolve()


__all__ = [
    "AppConfig",
    "InputConfig",
    "OutputConfig",
    "TreeConfig",
    "load_config",
]
