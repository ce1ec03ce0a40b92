"""Group annotated fenced blocks into named examples."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .annotations import FenceSpan, Segment
from .logging import get_logger
from .models import CodeBlock, Example

_logger = get_logger("examples")


@dataclass
class _ExampleRecord:
    """Per-name aggregation state built during a single scan."""

    blocks: List[CodeBlock] = field(default_factory=list)
    height: Optional[str] = None

    def add(self, block: CodeBlock) -> None:
        self.blocks.append(block)
        if not self.height and block.height:
            self.height = block.height

    def options(self) -> Dict[str, str]:
        return {"height": self.height} if self.height else {}


def code_block_for(fence: FenceSpan) -> Optional[CodeBlock]:
    """Build the CodeBlock for an annotated fence, or None for an unnamed one."""
    annotation = fence.annotation
    if annotation is None:
        return None
    return CodeBlock(
        extension=annotation.extension,
        code=fence.body,
        hidden=annotation.hidden,
        height=annotation.height,
    )


def collect_examples(segments: Iterable[Segment]) -> Dict[str, Example]:
    """Return examples keyed by name, in order of first appearance.

    Blocks sharing a name are accumulated in source order regardless of their
    extension. The first block declaring a ``height`` sets the example height.
    """
    records: Dict[str, _ExampleRecord] = {}
    for segment in segments:
        if not isinstance(segment, FenceSpan):
            continue
        block = code_block_for(segment)
        if block is None:
            continue
        name = segment.annotation.name  # type: ignore[union-attr]
        records.setdefault(name, _ExampleRecord()).add(block)

    examples = {
        name: Example(name=name, blocks=record.blocks, options=record.options())
        for name, record in records.items()
    }
    if examples:
        _logger.debug("Collected %d example(s): %s", len(examples), ", ".join(examples))
    return examples


__all__ = ["code_block_for", "collect_examples"]
