"""Content scanner: runs one pattern kind over message text.

The scan cursor is a local index handed to ``Pattern.search`` on every step,
so nothing is left behind on the shared compiled pattern. Scans of the same
kind are still serialised with one lock per kind.
"""

from __future__ import annotations

import threading
from typing import Iterable

from .patterns import PATTERN_TABLE, get_rule
from .types import MatchResult, PatternKind, ScanResult

# Kinds used by scan_all() when the caller does not pick any: the ones that
# reference platform objects rather than text styling.
DEFAULT_SCAN_KINDS: tuple[PatternKind, ...] = (
    PatternKind.EMOJI,
    PatternKind.JUMP_CHANNEL,
    PatternKind.JUMP_CHANNEL_MESSAGE,
    PatternKind.MENTION_CHANNEL,
    PatternKind.MENTION_ROLE,
    PatternKind.MENTION_USER,
    PatternKind.TEXT_URL,
)


class ContentScanner:
    """Thread-safe driver for the pattern table.

    One instance is shared module-wide (see ``scan``); creating extra
    instances is fine but they do not share locks.
    """

    def __init__(self) -> None:
        self._locks: dict[PatternKind, threading.Lock] = {
            kind: threading.Lock() for kind in PATTERN_TABLE
        }

    def scan(
        self,
        kind: PatternKind | str,
        content: str,
        first_only: bool = False,
    ) -> ScanResult:
        """Return every non-overlapping match of *kind* in *content*.

        Raises:
            UnknownPatternKind: *kind* is not a known pattern kind. Raised
                before any matching happens.
        """
        rule = get_rule(kind)
        matches: list[MatchResult] = []

        with self._locks[rule.kind]:
            pos = 0
            while pos <= len(content):
                match = rule.pattern.search(content, pos)
                if match is None:
                    break
                matches.append(rule.extract(match, content))
                if first_only:
                    break
                # Step over zero-width matches so the loop always advances
                pos = match.end() if match.end() > match.start() else match.end() + 1

        return ScanResult(kind=rule.kind, pattern=rule.pattern, matches=matches)

    def scan_all(
        self,
        content: str,
        kinds: Iterable[PatternKind | str] | None = None,
    ) -> dict[PatternKind, list[MatchResult]]:
        """Scan *content* for several kinds, keyed by kind.

        Kinds with no matches are left out of the result.
        """
        found: dict[PatternKind, list[MatchResult]] = {}
        for kind in kinds if kinds is not None else DEFAULT_SCAN_KINDS:
            result = self.scan(kind, content)
            if result:
                found[result.kind] = result.matches
        return found


_default_scanner = ContentScanner()


def scan(kind: PatternKind | str, content: str, first_only: bool = False) -> ScanResult:
    """Scan with the shared module-level scanner. See ``ContentScanner.scan``."""
    return _default_scanner.scan(kind, content, first_only)


def scan_all(
    content: str,
    kinds: Iterable[PatternKind | str] | None = None,
) -> dict[PatternKind, list[MatchResult]]:
    """Scan several kinds with the shared scanner. See ``ContentScanner.scan_all``."""
    return _default_scanner.scan_all(content, kinds)
