from __future__ import annotations

import pytest

BUTTON_MARKDOWN = (
    "---\n"
    "name: Button\n"
    "category: Forms\n"
    "---\n"
    "A button.\n"
    "\n"
    "```demo.html\n"
    "<button>Hi</button>\n"
    "```\n"
)


@pytest.fixture
def button_markdown() -> str:
    """Markdown document describing a single Button component."""
    return BUTTON_MARKDOWN
