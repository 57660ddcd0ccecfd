"""Quote-aware argument tokenizer for command strings.

Takes one argument at a time off the head of a string. A leading quote
character groups everything up to its own closing character into a single
argument; anything else splits on the first space.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from ..errors import EmptyInput
from .types import TokenizeResult

# Opening quote -> the only character that closes it.
QUOTE_PAIRS: Mapping[str, str] = MappingProxyType(
    {
        '"': '"',
        "'": "'",
        "\u2019": "\u2019",  # ’ ’
        "\u201A": "\u201B",  # ‚ ‛
        "\u201C": "\u201D",  # “ ”
        "\u201E": "\u201F",  # „ ‟
        "\u300C": "\u300D",  # 「 」
        "\u300E": "\u300F",  # 『 』
        "\u301D": "\u301E",  # 〝 〞
        "\uFE41": "\uFE42",  # ﹁ ﹂
        "\uFE43": "\uFE44",  # ﹃ ﹄
        "\uFF02": "\uFF02",  # ＂ ＂
        "\uFF62": "\uFF63",  # ｢ ｣
        "\u00AB": "\u00BB",  # « »
        "\u300A": "\u300B",  # 《 》
        "\u3008": "\u3009",  # 〈 〉
    }
)


def next_argument(value: str) -> TokenizeResult:
    """Split *value* into its first argument and the trimmed remainder.

    A quoted head only counts when its closing character appears later in
    the string; otherwise the quote is kept as an ordinary character and the
    string is split on whitespace.

    Raises:
        EmptyInput: *value* is empty.
    """
    if not value:
        raise EmptyInput()

    head, rest = value[:1], value[1:]

    closer = QUOTE_PAIRS.get(head)
    if closer is not None:
        index = rest.find(closer)
        if index != -1:
            return TokenizeResult(rest[:index], rest[index + 1 :].strip())

    index = rest.find(" ")
    if index == -1:
        return TokenizeResult(head + rest, "")
    return TokenizeResult(head + rest[:index], rest[index:].strip())


def iter_arguments(value: str) -> Iterator[str]:
    """Yield every argument of *value* in order."""
    remainder = value.strip()
    while remainder:
        token, remainder = next_argument(remainder)
        yield token


def split_arguments(value: str) -> list[str]:
    """Return every argument of *value* as a list.

    >>> split_arguments('ban "Some User" spamming links')
    ['ban', 'Some User', 'spamming', 'links']
    """
    return list(iter_arguments(value))


class QuoteTokenizer:
    """Namespace wrapper exposing the tokenizer as ``QuoteTokenizer.next``."""

    @staticmethod
    def next(value: str) -> TokenizeResult:
        return next_argument(value)

    @staticmethod
    def split(value: str) -> list[str]:
        return split_arguments(value)
