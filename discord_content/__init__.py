"""discord-content — lexer for Discord message content.

Extracts mentions, jump links and markdown spans from message text, and
splits command strings into quote-aware arguments.

Quick start::

    from discord_content import scan, next_argument

    scan("MENTION_USER", "hi <@!42>").first.id        # "42"
    next_argument('"hello world" rest')               # ("hello world", "rest")

"""

from .errors import ContentError, EmptyInput, InvalidImageFormat, UnknownPatternKind
from .lexer import (
    PATTERN_TABLE,
    QUOTE_PAIRS,
    ContentScanner,
    MatchResult,
    PatternKind,
    PatternRule,
    QuoteTokenizer,
    ScanResult,
    TokenizeResult,
    get_rule,
    iter_arguments,
    next_argument,
    scan,
    scan_all,
    split_arguments,
)
from .utils.conversions import (
    ImageFormat,
    add_query,
    any_to_camel_case,
    get_acronym,
    get_format_from_hash,
    guild_id_to_shard_id,
    hex_to_int,
    int_to_hex,
    int_to_rgb,
    rgb_to_int,
    snowflake_to_datetime,
    to_camel_case,
)

__all__ = [
    # Lexer
    "PATTERN_TABLE",
    "ContentScanner",
    "MatchResult",
    "PatternKind",
    "PatternRule",
    "ScanResult",
    "get_rule",
    "scan",
    "scan_all",
    # Arguments
    "QUOTE_PAIRS",
    "QuoteTokenizer",
    "TokenizeResult",
    "iter_arguments",
    "next_argument",
    "split_arguments",
    # Errors
    "ContentError",
    "EmptyInput",
    "InvalidImageFormat",
    "UnknownPatternKind",
    # Conversions
    "ImageFormat",
    "add_query",
    "any_to_camel_case",
    "get_acronym",
    "get_format_from_hash",
    "guild_id_to_shard_id",
    "hex_to_int",
    "int_to_hex",
    "int_to_rgb",
    "rgb_to_int",
    "snowflake_to_datetime",
    "to_camel_case",
]
