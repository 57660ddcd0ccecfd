"""Pattern table: one compiled expression and one extraction rule per kind.

The table is built once at import time and never mutated. Compiled
``re.Pattern`` objects carry no scan position, so sharing them is safe; the
scanner keeps its cursor in a local variable.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from ..errors import UnknownPatternKind
from .types import MatchResult, PatternKind

logger = logging.getLogger(__name__)

Extractor = Callable[[re.Match, str], MatchResult]

ANIMATED_EMOJI_PREFIX = "<a:"

_JUMP_PREFIX = r"^https?://(?:(?:canary|ptb)\.)?(?:discord|discordapp)\.com/channels/"


@dataclass(frozen=True)
class PatternRule:
    """Compiled grammar for a kind plus the function that reads its groups."""

    kind: PatternKind
    pattern: re.Pattern[str]
    extract: Extractor


def _span(match: re.Match[str], **fields: object) -> MatchResult:
    return MatchResult(matched=match.group(0), start=match.start(), end=match.end(), **fields)


def _emoji(match: re.Match[str], content: str) -> MatchResult:
    # Animated is decided by the start of the whole content, not of the match.
    return _span(
        match,
        name=match.group(1),
        id=match.group(2),
        animated=content.startswith(ANIMATED_EMOJI_PREFIX),
    )


def _jump_channel(match: re.Match[str], content: str) -> MatchResult:
    return _span(match, guild_id=match.group(1), channel_id=match.group(2))


def _jump_channel_message(match: re.Match[str], content: str) -> MatchResult:
    return _span(
        match,
        guild_id=match.group(1),
        channel_id=match.group(2),
        message_id=match.group(3),
    )


def _mention(match: re.Match[str], content: str) -> MatchResult:
    return _span(match, id=match.group(1))


def _mention_user(match: re.Match[str], content: str) -> MatchResult:
    return _span(match, id=match.group(2), mention_type=match.group(1))


def _codeblock(match: re.Match[str], content: str) -> MatchResult:
    return _span(match, language=match.group(2), text=match.group(3))


def _italics(match: re.Match[str], content: str) -> MatchResult:
    underscore, asterisk = match.group(1), match.group(2)
    return _span(match, text=underscore if underscore is not None else asterisk)


def _text(match: re.Match[str], content: str) -> MatchResult:
    return _span(match, text=match.group(1))


def _rule(kind: PatternKind, expression: str, extract: Extractor, flags: int = 0) -> PatternRule:
    return PatternRule(kind=kind, pattern=re.compile(expression, flags), extract=extract)


_RULES: dict[PatternKind, PatternRule] = {
    rule.kind: rule
    for rule in (
        _rule(PatternKind.EMOJI, r"<a?:(\w+):(\d+)>", _emoji, re.ASCII),
        _rule(
            PatternKind.JUMP_CHANNEL,
            _JUMP_PREFIX + r"(@me|\d+)/(\d+)\Z",
            _jump_channel,
            re.ASCII,
        ),
        _rule(
            PatternKind.JUMP_CHANNEL_MESSAGE,
            _JUMP_PREFIX + r"(@me|\d+)/(\d+)/(\d+)\Z",
            _jump_channel_message,
            re.ASCII,
        ),
        _rule(PatternKind.MENTION_CHANNEL, r"<#(\d+)>", _mention, re.ASCII),
        _rule(PatternKind.MENTION_ROLE, r"<@&(\d+)>", _mention, re.ASCII),
        _rule(PatternKind.MENTION_USER, r"<@(!?)(\d+)>", _mention_user, re.ASCII),
        _rule(PatternKind.TEXT_BOLD, r"\*\*([\s\S]+?)\*\*", _text),
        _rule(
            PatternKind.TEXT_CODEBLOCK,
            r"```(([a-z0-9-]+?)\n+)?\n*([\s\S]+?)\n*```",
            _codeblock,
            re.IGNORECASE | re.ASCII,
        ),
        _rule(PatternKind.TEXT_CODESTRING, r"`([\s\S]+?)`", _text),
        _rule(PatternKind.TEXT_ITALICS, r"_([\s\S]+?)_|\*([\s\S]+?)\*", _italics),
        _rule(PatternKind.TEXT_SNOWFLAKE, r"(\d+)", _text, re.ASCII),
        _rule(PatternKind.TEXT_SPOILER, r"\|\|([\s\S]+?)\|\|", _text),
        _rule(PatternKind.TEXT_STRIKE, r"~~([\s\S]+?)~~(?!_)", _text),
        _rule(PatternKind.TEXT_UNDERLINE, r"__([\s\S]+?)__", _text),
        _rule(PatternKind.TEXT_URL, r"(https?://[^\s<]+[^<>.,:;\"'\]\s])", _text),
    )
}

PATTERN_TABLE: Mapping[PatternKind, PatternRule] = MappingProxyType(_RULES)


def resolve_kind(kind: PatternKind | str) -> PatternKind:
    """Return the ``PatternKind`` for an enum member or a case-insensitive name."""
    if isinstance(kind, PatternKind):
        return kind
    if not isinstance(kind, str):
        raise UnknownPatternKind(kind)
    try:
        return PatternKind[kind.upper()]
    except KeyError:
        raise UnknownPatternKind(kind) from None


def get_rule(kind: PatternKind | str) -> PatternRule:
    """Look up the rule for *kind*, raising ``UnknownPatternKind`` if absent."""
    resolved = resolve_kind(kind)
    logger.debug("Resolved pattern kind %r -> %s", kind, resolved.name)
    return PATTERN_TABLE[resolved]
