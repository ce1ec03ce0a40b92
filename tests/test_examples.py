"""Tests for docblocks.examples."""

from __future__ import annotations

from docblocks.annotations import split_fences
from docblocks.examples import collect_examples


def test_blocks_sharing_a_name_form_one_example() -> None:
    content = "```demo.html\n<b>x</b>\n```\n\n```demo.js\nrun();\n```\n"
    examples = collect_examples(split_fences(content))

    assert list(examples) == ["demo"]
    blocks = examples["demo"].blocks
    assert [block.extension for block in blocks] == ["html", "js"]
    assert [block.code for block in blocks] == ["<b>x</b>\n", "run();\n"]
    assert examples["demo"].options == {}


def test_hidden_is_tracked_per_block() -> None:
    content = "```demo.js hidden\nsetup();\n```\n```demo.html\n<b/>\n```\n"
    blocks = collect_examples(split_fences(content))["demo"].blocks

    assert [block.hidden for block in blocks] == [True, False]


def test_first_declared_height_wins() -> None:
    content = (
        "```demo.html height=400\n<b/>\n```\n"
        "```demo.js\nx();\n```\n"
        "```demo.css height=100\nb {}\n```\n"
    )
    example = collect_examples(split_fences(content))["demo"]

    assert example.options == {"height": "400"}
    assert [block.height for block in example.blocks] == ["400", None, "100"]


def test_height_from_later_block_when_first_lacks_it() -> None:
    content = "```demo.js\nx();\n```\n```demo.html height=250\n<b/>\n```\n"
    assert collect_examples(split_fences(content))["demo"].height == "250"


def test_unnamed_blocks_are_skipped() -> None:
    content = "```js\nvar a;\n```\n```\nplain\n```\n"
    assert collect_examples(split_fences(content)) == {}


def test_examples_keep_first_seen_order() -> None:
    content = "```b.html\n1\n```\n```a.html\n2\n```\n```b.js\n3\n```\n"
    examples = collect_examples(split_fences(content))

    assert list(examples) == ["b", "a"]
    assert len(examples["b"].blocks) == 2


def test_empty_fence_body() -> None:
    examples = collect_examples(split_fences("```demo.html\n```\n"))
    assert examples["demo"].blocks[0].code == ""


def test_empty_height_does_not_block_a_later_height() -> None:
    content = "```demo.html height=\n<b/>\n```\n```demo.js height=400\nx();\n```\n"
    example = collect_examples(split_fences(content))["demo"]

    assert example.options == {"height": "400"}
    assert example.blocks[0].height is None
