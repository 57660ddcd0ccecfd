"""Shared pytest fixtures for discord_content tests.

These fixtures are automatically available to all test files in this directory.
"""

from __future__ import annotations

import pytest

from discord_content.lexer import ContentScanner


@pytest.fixture
def scanner() -> ContentScanner:
    """A fresh scanner with its own per-kind locks."""
    return ContentScanner()


@pytest.fixture
def mixed_content() -> str:
    """A message body that exercises every pattern kind at least once."""
    return (
        "<a:wave:111> hey <@!42> and <@7>, ping <@&99> in <#555>.\n"
        "**bold** _italic_ *also italic* __under__ ~~strike~~ ||spoiler|| `code`\n"
        "```py\nprint('hi')\n```\n"
        "docs at https://example.com/docs, id 80351110224678912 <:blob:222>"
    )
