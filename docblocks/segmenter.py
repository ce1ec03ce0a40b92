"""Split raw input into documentation blocks."""

from __future__ import annotations

import re
from typing import Collection, List, Optional

from .config import DEFAULT_MARKDOWN_EXTENSIONS, normalise_extension

_COMMENT_PATTERN = re.compile(r"/\*(.*?)\*/", re.DOTALL)
# Leading/trailing runs of whitespace and asterisks around comment content.
_EDGE_PATTERN = re.compile(r"^[\s*]+|[\s*]+$")


def is_markdown(
    kind: Optional[str], markdown_extensions: Collection[str] = DEFAULT_MARKDOWN_EXTENSIONS
) -> bool:
    """Return True when ``kind`` names a markdown-family extension."""
    return normalise_extension(kind) in markdown_extensions


def segment(
    text: str,
    kind: Optional[str] = None,
    *,
    markdown_extensions: Collection[str] = DEFAULT_MARKDOWN_EXTENSIONS,
) -> List[str]:
    """Return the documentation blocks found in ``text``.

    Markdown input is a single block. Any other input contributes one block per
    ``/* ... */`` comment, with the comment's edge asterisks and whitespace removed.
    """
    if is_markdown(kind, markdown_extensions):
        return [text]
    return [_strip_comment(match.group(1)) for match in _COMMENT_PATTERN.finditer(text)]


def _strip_comment(inner: str) -> str:
    return _EDGE_PATTERN.sub("", inner)


__all__ = ["is_markdown", "segment"]
