"""Entry point for the discord-content command line tool."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

from dotenv import load_dotenv

from .errors import UnknownPatternKind
from .lexer import DEFAULT_SCAN_KINDS, PatternKind, resolve_kind, scan, scan_all, split_arguments
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load and validate configuration from environment."""
    load_dotenv()

    log_level = os.getenv("DISCORD_CONTENT_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.error("DISCORD_CONTENT_LOG_LEVEL: unknown level %r", log_level)
        sys.exit(1)

    return {
        "log_level": log_level,
        "default_kinds": os.getenv("DISCORD_CONTENT_DEFAULT_KINDS", ""),
    }


def resolve_default_kinds(raw_kinds: str) -> list[PatternKind]:
    """Parse the comma-separated kind list used by ``scan-all``.

    Raises:
        UnknownPatternKind: one of the names is not a pattern kind.
    """
    names = [name.strip() for name in raw_kinds.split(",") if name.strip()]
    if not names:
        return list(DEFAULT_SCAN_KINDS)
    return [resolve_kind(name) for name in names]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discord-content",
        description="Extract mentions, markup and arguments from Discord message text.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_scan = sub.add_parser("scan", help="scan TEXT for one pattern kind")
    p_scan.add_argument("kind", help="pattern kind, e.g. MENTION_USER (case-insensitive)")
    p_scan.add_argument("text")
    p_scan.add_argument("--first", action="store_true", help="stop after the first match")

    p_all = sub.add_parser("scan-all", help="scan TEXT for every default kind")
    p_all.add_argument("text")

    p_args = sub.add_parser("args", help="split TEXT into quote-aware arguments")
    p_args.add_argument("text")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(config["log_level"])

    if args.command == "scan":
        try:
            result = scan(args.kind, args.text, first_only=args.first)
        except UnknownPatternKind as e:
            logger.error("%s", e)
            return 1
        logger.debug("%s: %d match(es)", result.kind.name, len(result))
        output: object = [m.to_dict() for m in result.matches]
    elif args.command == "scan-all":
        try:
            kinds = resolve_default_kinds(config["default_kinds"])
        except UnknownPatternKind as e:
            logger.error("DISCORD_CONTENT_DEFAULT_KINDS: %s", e)
            return 1
        found = scan_all(args.text, kinds)
        output = {kind.name: [m.to_dict() for m in matches] for kind, matches in found.items()}
    else:
        output = split_arguments(args.text)

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
