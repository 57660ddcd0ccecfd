"""Type definitions for the content lexer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class PatternKind(Enum):
    """Markup and mention grammars recognised in message content."""

    EMOJI = "EMOJI"
    JUMP_CHANNEL = "JUMP_CHANNEL"
    JUMP_CHANNEL_MESSAGE = "JUMP_CHANNEL_MESSAGE"
    MENTION_CHANNEL = "MENTION_CHANNEL"
    MENTION_ROLE = "MENTION_ROLE"
    MENTION_USER = "MENTION_USER"
    TEXT_BOLD = "TEXT_BOLD"
    TEXT_CODEBLOCK = "TEXT_CODEBLOCK"
    TEXT_CODESTRING = "TEXT_CODESTRING"
    TEXT_ITALICS = "TEXT_ITALICS"
    TEXT_SNOWFLAKE = "TEXT_SNOWFLAKE"
    TEXT_SPOILER = "TEXT_SPOILER"
    TEXT_STRIKE = "TEXT_STRIKE"
    TEXT_UNDERLINE = "TEXT_UNDERLINE"
    TEXT_URL = "TEXT_URL"


@dataclass(frozen=True)
class MatchResult:
    """One match of a pattern against message content.

    ``matched`` is always the verbatim slice ``content[start:end]``. The
    remaining fields are only filled in for the kinds that define them.
    """

    matched: str
    start: int = 0
    end: int = 0
    name: str | None = None
    id: str | None = None
    animated: bool | None = None
    guild_id: str | None = None
    channel_id: str | None = None
    message_id: str | None = None
    mention_type: str | None = None
    language: str | None = None
    text: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the populated fields only, for JSON output."""
        return {key: value for key, value in self.__dict__.items() if value is not None}


@dataclass(frozen=True)
class ScanResult:
    """All matches of a single kind, in left-to-right order."""

    kind: PatternKind
    pattern: re.Pattern[str]
    matches: list[MatchResult] = field(default_factory=list)

    @property
    def first(self) -> MatchResult | None:
        return self.matches[0] if self.matches else None

    def __bool__(self) -> bool:
        return bool(self.matches)

    def __len__(self) -> int:
        return len(self.matches)


class TokenizeResult(NamedTuple):
    """Head token of a command string and what is left after it."""

    token: str
    remainder: str
