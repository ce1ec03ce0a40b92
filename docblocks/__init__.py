"""Extract documentation components and their examples from markdown and source comments."""

from .frontmatter import FrontMatterError
from .merge import merge
from .models import CodeBlock, Component, Example, MetaEntry
from .parser import Parser, ParserOptions, parse

__all__ = [
    "CodeBlock",
    "Component",
    "Example",
    "FrontMatterError",
    "MetaEntry",
    "Parser",
    "ParserOptions",
    "merge",
    "parse",
]
