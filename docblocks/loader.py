"""Load documentation components from files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .logging import get_logger
from .merge import merge
from .models import Component
from .parser import Parser

_logger = get_logger("loader")


def parse_file(path: Path, parser: Optional[Parser] = None) -> List[Component]:
    """Parse a single file, using its suffix to pick markdown or comment mode."""
    parser = parser or Parser()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")
    content = path.read_text(encoding="utf-8")
    components = parser.parse(content, path.suffix)
    _logger.debug("Parsed %d component(s) from %s", len(components), path)
    return components


def parse_paths(paths: Iterable[Path], parser: Optional[Parser] = None) -> List[Component]:
    """Parse several files and merge components that share a name across them."""
    parser = parser or Parser()
    components: List[Component] = []
    for path in paths:
        components.extend(parse_file(path, parser))
    if not parser.options.merge:
        return components
    return merge(components)


__all__ = ["parse_file", "parse_paths"]
