"""End-to-end tests for docblocks.parser."""

from __future__ import annotations

import pytest

from docblocks import FrontMatterError, Parser, ParserOptions, parse
from docblocks.models import MetaEntry


def test_parse_markdown_component(button_markdown: str) -> None:
    components = parse(button_markdown, "md")

    assert len(components) == 1
    button = components[0]
    assert button.name == "Button"
    assert button.category == "Forms"
    assert button.meta == []
    assert list(button.examples) == ["demo"]
    block = button.examples["demo"].blocks[0]
    assert block.extension == "html"
    assert block.code == "<button>Hi</button>\n"
    assert block.hidden is False
    assert '<example name="demo"></example>\n```html\n' in button.description
    assert button.description == (
        'A button.\n\n<example name="demo"></example>\n```html\n<button>Hi</button>\n```\n'
    )


def test_parse_source_comments() -> None:
    source = (
        "/**\n"
        "---\n"
        "name: Card\n"
        "status: stable\n"
        "tags:\n"
        "  - layout\n"
        "  - surface\n"
        "---\n"
        "A card.\n"
        "*/\n"
        ".card { padding: 1rem; }\n"
        "/* plain comment */\n"
    )
    components = Parser().parse(source, "css")

    assert len(components) == 1
    card = components[0]
    assert card.name == "Card"
    assert card.category is None
    assert card.meta == [
        MetaEntry("status", "stable"),
        MetaEntry("tags", "layout"),
        MetaEntry("tags", "surface"),
    ]
    assert card.description == "A card."


def test_blocks_without_name_are_dropped() -> None:
    source = "/*\n---\ncategory: Forms\n---\nNo name here.\n*/\n/* */"
    assert parse(source, "js") == []


def test_markdown_without_front_matter_is_dropped() -> None:
    assert parse("# Heading\n\nText\n", "md") == []


def test_components_sharing_a_name_are_merged() -> None:
    source = (
        "/*\n---\nname: Button\ncategory: Forms\n---\nFirst.\n\n"
        "```demo.html\n<button/>\n```\n*/\n"
        "/*\n---\nname: Button\nsince: 2\n---\nSecond.\n\n"
        "```demo.js\nclick();\n```\n*/\n"
    )
    components = parse(source, "js")

    assert len(components) == 1
    button = components[0]
    assert button.category == "Forms"
    assert button.meta == [MetaEntry("since", 2)]
    assert [block.extension for block in button.examples["demo"].blocks] == ["html", "js"]
    assert button.description.startswith("First.")
    assert button.description.endswith("Second.\n\n```js\nclick();\n```")


def test_merge_can_be_disabled() -> None:
    source = "/*\n---\nname: A\n---\none\n*/ /*\n---\nname: A\n---\ntwo\n*/"
    components = Parser(ParserOptions(merge=False)).parse(source, "js")

    assert [component.description for component in components] == ["one", "two"]


def test_example_aggregation_end_to_end() -> None:
    markdown = (
        "---\nname: Modal\n---\n"
        "```demo.js hidden\nopen();\n```\n"
        "```demo.html height=400\n<div/>\n```\n"
        "```demo.css\n.modal {}\n```\n"
    )
    modal = parse(markdown, "markdown")[0]
    example = modal.examples["demo"]

    assert [block.hidden for block in example.blocks] == [True, False, False]
    assert example.options == {"height": "400"}
    assert modal.description == (
        '\n<example name="demo" height="400"></example>\n'
        "```html\n<div/>\n```\n"
        "```css\n.modal {}\n```\n"
    )


def test_non_string_name_is_coerced() -> None:
    assert parse("---\nname: 42\n---\n", "md")[0].name == "42"


def test_invalid_front_matter_propagates() -> None:
    with pytest.raises(FrontMatterError):
        parse("---\nname: [broken\n---\n", "md")


def test_parse_without_extension_uses_comment_mode(button_markdown: str) -> None:
    assert parse(button_markdown) == []


def test_non_mapping_front_matter_does_not_drop_siblings() -> None:
    source = (
        "/*\n---\nname: Button\n---\nA button.\n*/\n"
        "/*\n---\nJust a divider note\n---\n*/\n"
    )
    assert [component.name for component in parse(source, "css")] == ["Button"]
