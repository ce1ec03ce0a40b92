"""Fence segmentation and the ``name.extension option=value`` header grammar."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

FENCE = "```"

_HEADER_PATTERN = re.compile(
    r"^\s*(?P<name>[^.\s]+)\.(?P<extension>\w+)(?:,(?P<variant>\S+))?(?P<rest>.*)$"
)


@dataclass(frozen=True)
class AnnotationHeader:
    """Parsed form of an annotated fence header such as ``demo.html height=400``."""

    name: str
    extension: str
    variant: Optional[str] = None
    options: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def hidden(self) -> bool:
        return "hidden" in self.options

    @property
    def height(self) -> Optional[str]:
        return self.options.get("height") or None


@dataclass(frozen=True)
class TextSpan:
    """Plain text between fenced blocks."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class FenceSpan:
    """A fenced block from its opening backticks through its closing backticks."""

    header: str
    body: str
    newline: str = "\n"
    annotation: Optional[AnnotationHeader] = None
    closing: str = FENCE

    @property
    def hidden(self) -> bool:
        return has_hidden_token(self.header)

    def render(self, header: Optional[str] = None) -> str:
        return f"{FENCE}{self.header if header is None else header}{self.newline}{self.body}{self.closing}"


Segment = Union[TextSpan, FenceSpan]


def parse_options(option_string: str) -> Dict[str, Optional[str]]:
    """Split ``key`` and ``key=value`` tokens into a mapping; bare keys map to None."""
    options: Dict[str, Optional[str]] = {}
    for token in option_string.split():
        key, sep, value = token.partition("=")
        options[key] = value if sep else None
    return options


def parse_header(header: str) -> Optional[AnnotationHeader]:
    """Return the annotation in a fence header, or None for an unnamed block."""
    match = _HEADER_PATTERN.match(header.rstrip("\r\n"))
    if not match:
        return None
    return AnnotationHeader(
        name=match.group("name"),
        extension=match.group("extension"),
        variant=match.group("variant"),
        options=parse_options(match.group("rest")),
    )


def has_hidden_token(header: str) -> bool:
    """Return True when the header text carries a ``hidden`` flag."""
    return any(token.partition("=")[0] == "hidden" for token in header.split())


def split_fences(text: str) -> List[Segment]:
    """Split ``text`` into an ordered list of text and fence segments.

    Joining the rendered segments reproduces ``text`` exactly. A fence opens on
    a line starting with three backticks and closes on the next line holding
    nothing but three backticks and trailing whitespace; a fence that is never
    closed stays plain text.
    """
    lines = text.splitlines(keepends=True)
    segments: List[Segment] = []
    pending: List[str] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        closing = _find_closing(lines, index + 1) if line.startswith(FENCE) else None
        if closing is None:
            pending.append(line)
            index += 1
            continue

        preceding = "".join(pending)
        if preceding:
            segments.append(TextSpan(preceding))
        pending = []

        opening = line[len(FENCE):]
        header = opening.rstrip("\r\n")
        newline = opening[len(header):]
        body = "".join(lines[index + 1 : closing])
        closing_line = lines[closing].rstrip("\r\n")
        segments.append(
            FenceSpan(
                header=header,
                body=body,
                newline=newline,
                annotation=parse_header(header),
                closing=closing_line,
            )
        )
        pending.append(lines[closing][len(closing_line):])
        index = closing + 1

    tail = "".join(pending)
    if tail:
        segments.append(TextSpan(tail))
    return segments


def render(segments: List[Segment]) -> str:
    return "".join(segment.render() for segment in segments)


def _find_closing(lines: List[str], start: int) -> Optional[int]:
    for position in range(start, len(lines)):
        if lines[position].rstrip() == FENCE:
            return position
    return None


__all__ = [
    "AnnotationHeader",
    "FenceSpan",
    "Segment",
    "TextSpan",
    "has_hidden_token",
    "parse_header",
    "parse_options",
    "render",
    "split_fences",
]
