"""Consolidate components that share a name."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .logging import get_logger
from .models import Component

_logger = get_logger("merge")


def merge(components: Iterable[Component]) -> List[Component]:
    """Return one component per name, in order of first appearance.

    The first non-empty category wins, metadata entries are concatenated,
    non-empty descriptions are joined by a blank line and examples sharing a
    name have their code blocks appended (the first height is kept).
    """
    merged: Dict[str, Component] = {}
    for component in components:
        name = component.name or ""
        existing = merged.get(name)
        if existing is None:
            merged[name] = _copy(component)
            continue

        _logger.debug("Merging duplicate component %s", name)
        if not existing.category and component.category:
            existing.set_category(component.category)
        existing.meta.extend(component.meta)
        existing.set_description(_join_descriptions(existing.description, component.description))
        for example_name, example in component.get_examples().items():
            existing.add_example(example_name, example.blocks, example.options)
    return list(merged.values())


def _join_descriptions(first: str, second: str) -> str:
    if not second.strip():
        return first
    if not first.strip():
        return second
    return first.rstrip("\n") + "\n\n" + second.lstrip("\n")


def _copy(component: Component) -> Component:
    copy = Component(
        name=component.name,
        category=component.category,
        meta=list(component.meta),
        description=component.description,
    )
    for name, example in component.get_examples().items():
        copy.add_example(name, list(example.blocks), example.options)
    return copy


__all__ = ["merge"]
