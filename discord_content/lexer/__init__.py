"""Content lexer: pattern table, scanner and quote-aware argument tokenizer."""

from .arguments import QUOTE_PAIRS, QuoteTokenizer, iter_arguments, next_argument, split_arguments
from .patterns import PATTERN_TABLE, PatternRule, get_rule, resolve_kind
from .scanner import DEFAULT_SCAN_KINDS, ContentScanner, scan, scan_all
from .types import MatchResult, PatternKind, ScanResult, TokenizeResult

__all__ = [
    "DEFAULT_SCAN_KINDS",
    "PATTERN_TABLE",
    "QUOTE_PAIRS",
    "ContentScanner",
    "MatchResult",
    "PatternKind",
    "PatternRule",
    "QuoteTokenizer",
    "ScanResult",
    "TokenizeResult",
    "get_rule",
    "iter_arguments",
    "next_argument",
    "resolve_kind",
    "scan",
    "scan_all",
    "split_arguments",
]
