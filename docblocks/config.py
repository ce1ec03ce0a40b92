"""Configuration loading for docblocks (.docblocks.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".docblocks.yml"

DEFAULT_MARKDOWN_EXTENSIONS = ("markdown", "mdown", "md")
DEFAULT_RENDERABLE_EXTENSIONS = ("html", "jsx", "handlebars", "hbs")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ParserConfig:
    """Extension sets that drive block segmentation and placeholder insertion."""

    markdown_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )
    renderable_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_RENDERABLE_EXTENSIONS)
    )


@dataclass
class OutputConfig:
    """JSON output settings for the CLI."""

    indent: Optional[int] = 2


@dataclass
class DocBlocksConfig:
    """Represents the high-level settings defined in .docblocks.yml."""

    root: Path
    parser: ParserConfig = field(default_factory=ParserConfig)
    merge: bool = True
    output: OutputConfig = field(default_factory=OutputConfig)
    sources: List[str] = field(default_factory=list)

    def source_paths(self) -> List[Path]:
        """Return files matching the configured source globs, relative to ``root``."""
        found: Dict[Path, None] = {}
        for pattern in self.sources:
            for path in sorted(self.root.glob(pattern)):
                if path.is_file():
                    found.setdefault(path, None)
        return list(found)


def load_config(config_path: Path) -> DocBlocksConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocBlocksConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    parser_data = _as_dict(data.get("parser"))
    parser = ParserConfig()
    if parser_data:
        markdown = _as_extension_list(parser_data.get("markdown_extensions"))
        if markdown:
            parser.markdown_extensions = markdown
        renderable = _as_extension_list(parser_data.get("renderable_extensions"))
        if renderable:
            parser.renderable_extensions = renderable

    merge = _as_bool(data.get("merge"))

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    if "indent" in output_data:
        output.indent = _as_int(output_data.get("indent"))

    return DocBlocksConfig(
        root=root,
        parser=parser,
        merge=True if merge is None else merge,
        output=output,
        sources=_as_str_list(data.get("sources")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


def _as_extension_list(value: Any) -> List[str]:
    return [normalise_extension(item) for item in _as_str_list(value) if item.strip(". ")]


def normalise_extension(extension: Optional[str]) -> str:
    """Return ``extension`` lowercased and without a leading dot."""
    if not extension:
        return ""
    return extension.strip().lstrip(".").lower()
