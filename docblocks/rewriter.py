"""Rewrite description markdown for rendering.

The rewrite runs as ordered passes over the fence segments of the description:

1. insert an ``<example>`` placeholder before the first renderable fence of
   each registered example;
2. drop fences flagged ``hidden`` along with one preceding newline;
3. reduce annotated fence headers to the bare extension.

Output of the rewrite contains no annotated headers, so rewriting it again
changes nothing.
"""

from __future__ import annotations

from html import escape
from typing import Collection, List, Mapping, Set

from .annotations import FenceSpan, Segment, TextSpan, render, split_fences
from .config import DEFAULT_RENDERABLE_EXTENSIONS
from .models import Example


def placeholder_tag(example: Example) -> str:
    """Return the ``<example>`` tag (with trailing newline) for ``example``."""
    name = escape(example.name, quote=True)
    if example.height:
        height = escape(str(example.height), quote=True)
        return f'<example name="{name}" height="{height}"></example>\n'
    return f'<example name="{name}"></example>\n'


def insert_placeholders(
    segments: List[Segment],
    examples: Mapping[str, Example],
    renderable_extensions: Collection[str] = DEFAULT_RENDERABLE_EXTENSIONS,
) -> List[Segment]:
    tagged: Set[str] = set()
    result: List[Segment] = []
    for segment in segments:
        annotation = segment.annotation if isinstance(segment, FenceSpan) else None
        if (
            annotation is not None
            and annotation.name in examples
            and annotation.name not in tagged
            and annotation.extension in renderable_extensions
        ):
            tagged.add(annotation.name)
            result.append(TextSpan(placeholder_tag(examples[annotation.name])))
        result.append(segment)
    return result


def remove_hidden(segments: List[Segment]) -> List[Segment]:
    result: List[Segment] = []
    for segment in segments:
        if isinstance(segment, FenceSpan) and segment.hidden:
            if result and isinstance(result[-1], TextSpan) and result[-1].text.endswith("\n"):
                trimmed = result[-1].text[:-1]
                if trimmed:
                    result[-1] = TextSpan(trimmed)
                else:
                    result.pop()
            continue
        result.append(segment)
    return result


def strip_annotations(segments: List[Segment]) -> List[Segment]:
    result: List[Segment] = []
    for segment in segments:
        if isinstance(segment, FenceSpan) and segment.annotation is not None:
            segment = TextSpan(segment.render(header=segment.annotation.extension))
        result.append(segment)
    return result


def rewrite_description(
    content: str,
    examples: Mapping[str, Example],
    renderable_extensions: Collection[str] = DEFAULT_RENDERABLE_EXTENSIONS,
) -> str:
    """Return ``content`` with placeholders inserted and annotations removed."""
    segments = split_fences(content)
    segments = insert_placeholders(segments, examples, renderable_extensions)
    segments = remove_hidden(segments)
    segments = strip_annotations(segments)
    return render(segments)


__all__ = [
    "insert_placeholders",
    "placeholder_tag",
    "remove_hidden",
    "rewrite_description",
    "strip_annotations",
]
