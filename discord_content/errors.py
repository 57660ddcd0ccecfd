"""Exceptions raised by discord-content.

All of them derive from ``ValueError`` so callers that only care about bad
input can keep catching the builtin.
"""

from __future__ import annotations


class ContentError(ValueError):
    """Base class for every error raised by this package."""


class UnknownPatternKind(ContentError):
    """The requested pattern kind is not in the pattern table."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown pattern kind: {kind!r}")


class EmptyInput(ContentError):
    """The argument tokenizer was handed an empty string."""

    def __init__(self) -> None:
        super().__init__("Cannot take an argument from an empty string")


class InvalidImageFormat(ContentError):
    """An image format outside of ``ImageFormat`` was requested."""

    def __init__(self, fmt: str, valid: list[str]) -> None:
        self.format = fmt
        self.valid = valid
        super().__init__(f"Invalid format: {fmt!r}, valid: {', '.join(valid)}")
