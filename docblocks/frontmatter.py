"""YAML front-matter extraction for documentation blocks."""

from __future__ import annotations

import re
from typing import Any, Dict

import yaml

from .logging import get_logger
from .models import Field, FrontMatter, ListField, Scalar

_logger = get_logger("frontmatter")

_FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<header>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a front-matter header is not valid YAML."""


def parse(text: str) -> FrontMatter:
    """Split ``text`` into its front-matter fields and the body that follows.

    Without a ``---`` header the data is empty and the content is ``text``.
    """
    match = _FRONT_MATTER_PATTERN.match(text)
    if not match:
        return FrontMatter(data={}, content=text)

    header = match.group("header")
    try:
        loaded = yaml.safe_load(header) if header.strip() else None
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc

    content = text[match.end():]
    if not isinstance(loaded, dict):
        if loaded is not None:
            _logger.debug("Ignoring front matter that is not a mapping of fields")
        return FrontMatter(data={}, content=content)

    return FrontMatter(data=_to_fields(loaded), content=content)


def _to_fields(raw: Dict[Any, Any]) -> Dict[str, Field]:
    fields: Dict[str, Field] = {}
    for key, value in raw.items():
        if isinstance(value, (list, tuple)):
            fields[str(key)] = ListField(tuple(value))
        else:
            fields[str(key)] = Scalar(value)
    return fields


__all__ = ["FrontMatterError", "parse"]
