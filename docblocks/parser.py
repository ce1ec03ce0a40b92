"""Parse documentation components out of markdown or source files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import frontmatter
from .annotations import split_fences
from .config import (
    DEFAULT_MARKDOWN_EXTENSIONS,
    DEFAULT_RENDERABLE_EXTENSIONS,
    DocBlocksConfig,
)
from .examples import collect_examples
from .logging import get_logger
from .merge import merge
from .models import Component, FrontMatter
from .rewriter import rewrite_description
from .segmenter import segment

_RESERVED_FIELDS = ("name", "category")


@dataclass(frozen=True)
class ParserOptions:
    """Extension sets and merge behaviour used by :class:`Parser`."""

    markdown_extensions: Tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    renderable_extensions: Tuple[str, ...] = DEFAULT_RENDERABLE_EXTENSIONS
    merge: bool = True

    @classmethod
    def from_config(cls, config: DocBlocksConfig) -> "ParserOptions":
        return cls(
            markdown_extensions=tuple(config.parser.markdown_extensions),
            renderable_extensions=tuple(config.parser.renderable_extensions),
            merge=config.merge,
        )


@dataclass
class Parser:
    """Extracts components from a single input string."""

    options: ParserOptions = field(default_factory=ParserOptions)

    def __post_init__(self) -> None:
        self.logger = get_logger("parser")

    def parse(self, content: str, extension: Optional[str] = None) -> List[Component]:
        """Parse docs from ``content``; ``extension`` selects markdown or comment mode."""
        blocks = segment(
            content, extension, markdown_extensions=self.options.markdown_extensions
        )
        self.logger.debug("Found %d documentation block(s)", len(blocks))

        components: List[Component] = []
        for block in blocks:
            components.extend(self.build_entries(block))

        if not self.options.merge:
            return components
        return merge(components)

    def build_entries(self, block: str) -> List[Component]:
        """Return zero or one component for a documentation block."""
        parsed = frontmatter.parse(block)
        name = parsed.get("name")
        if not name:
            self.logger.debug("Skipping documentation block without a name")
            return []

        component = Component()
        component.set_name(str(name))
        category = parsed.get("category")
        component.set_category(str(category) if category is not None else None)
        _add_meta(component, parsed)

        segments = split_fences(parsed.content)
        for example_name, example in collect_examples(segments).items():
            component.add_example(example_name, example.blocks, example.options)
        component.set_description(
            rewrite_description(
                parsed.content,
                component.get_examples(),
                self.options.renderable_extensions,
            )
        )
        return [component]


def _add_meta(component: Component, parsed: FrontMatter) -> None:
    for key, declared in parsed.data.items():
        if key in _RESERVED_FIELDS:
            continue
        for value in declared.values():
            component.add_meta(key, value)


def parse(content: str, extension: Optional[str] = None) -> List[Component]:
    """Parse ``content`` with default options."""
    return Parser().parse(content, extension)


__all__ = ["Parser", "ParserOptions", "parse"]
