"""Tests for docblocks.loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from docblocks.loader import parse_file, parse_paths


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_parse_file_uses_suffix(tmp_path: Path, button_markdown: str) -> None:
    path = _write(tmp_path / "button.md", button_markdown)
    components = parse_file(path)

    assert [component.name for component in components] == ["Button"]


def test_parse_paths_merges_across_files(tmp_path: Path, button_markdown: str) -> None:
    markdown = _write(tmp_path / "docs" / "button.md", button_markdown)
    source = _write(
        tmp_path / "src" / "button.js",
        "/*\n---\nname: Button\nsince: 1.2\n---\nJS notes.\n*/\nexport const x = 1;\n",
    )

    components = parse_paths([markdown, source])

    assert len(components) == 1
    assert [entry.value for entry in components[0].meta if entry.key == "since"] == [1.2]
    assert components[0].description.endswith("JS notes.")


def test_parse_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.md")
