"""Core data models shared across docblocks components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class Scalar:
    """Front-matter field declared with a single value."""

    value: Any

    def values(self) -> List[Any]:
        return [self.value]


@dataclass(frozen=True)
class ListField:
    """Front-matter field declared with an ordered list of values."""

    items: tuple

    def values(self) -> List[Any]:
        return list(self.items)


Field = Union[Scalar, ListField]


@dataclass
class FrontMatter:
    """Structured header data plus the body text that follows it."""

    data: Dict[str, Field] = field(default_factory=dict)
    content: str = ""

    def get(self, key: str) -> Any:
        """Return the raw value of a field, or None when it is not declared."""
        declared = self.data.get(key)
        if declared is None:
            return None
        if isinstance(declared, ListField):
            return declared.values()
        return declared.value


@dataclass(frozen=True)
class MetaEntry:
    """A single metadata key/value pair attached to a component."""

    key: str
    value: Any


@dataclass
class CodeBlock:
    """One fenced snippet belonging to an example."""

    extension: str
    code: str
    hidden: bool = False
    height: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "extension": self.extension,
            "code": self.code,
            "hidden": self.hidden,
        }
        if self.height is not None:
            data["height"] = self.height
        return data


@dataclass
class Example:
    """Named bundle of code blocks, possibly spanning several languages."""

    name: str
    blocks: List[CodeBlock] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def height(self) -> Optional[str]:
        return self.options.get("height")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "blocks": [block.to_dict() for block in self.blocks],
            "options": dict(self.options),
        }


@dataclass
class Component:
    """Documentation entry accumulated from one documentation block."""

    name: Optional[str] = None
    category: Optional[str] = None
    meta: List[MetaEntry] = field(default_factory=list)
    description: str = ""
    examples: Dict[str, Example] = field(default_factory=dict)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_category(self, category: Optional[str]) -> None:
        self.category = category

    def add_meta(self, key: str, value: Any) -> None:
        self.meta.append(MetaEntry(key=key, value=value))

    def set_description(self, description: str) -> None:
        self.description = description

    def add_example(
        self,
        name: str,
        code_blocks: Sequence[CodeBlock],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Example:
        """Register an example, extending an existing one with the same name."""
        example = self.examples.get(name)
        if example is None:
            example = Example(name=name)
            self.examples[name] = example
        example.blocks.extend(code_blocks)
        for key, value in (options or {}).items():
            example.options.setdefault(key, value)
        return example

    def get_examples(self) -> Dict[str, Example]:
        return self.examples

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category,
            "meta": [{"key": entry.key, "value": entry.value} for entry in self.meta],
            "description": self.description,
            "examples": {name: example.to_dict() for name, example in self.examples.items()},
        }
