"""Stateless conversions used alongside the lexer.

Colour and snowflake helpers defer to discord.py so values agree with what
the library itself produces for ``discord.Colour`` and ``discord.Object``.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Iterable
from urllib.parse import urlencode

import discord

from ..errors import InvalidImageFormat

ANIMATED_HASH_PREFIX = "a_"


class ImageFormat(Enum):
    """Image formats the CDN serves."""

    GIF = "gif"
    JPEG = "jpeg"
    JPG = "jpg"
    PNG = "png"
    WEBP = "webp"


IMAGE_FORMATS: tuple[str, ...] = tuple(fmt.value for fmt in ImageFormat)


# ---------------------------------------------------------------------------
# Key renaming
# ---------------------------------------------------------------------------


def to_camel_case(value: str) -> str:
    """Convert ``snake_case`` to ``camelCase``. Strings without ``_`` pass through."""
    if "_" not in value:
        return value
    joined = "".join(part[:1].upper() + part[1:].lower() for part in value.split("_"))
    return joined[:1].lower() + joined[1:]


def any_to_camel_case(obj: Any, skip: Iterable[str] | None = None) -> Any:
    """Recursively rename dict keys to camelCase.

    Keys listed in *skip* keep their name and their value is copied as-is.
    *skip* only applies to the top level.
    """
    if isinstance(obj, list):
        return [any_to_camel_case(item) for item in obj]
    if isinstance(obj, dict):
        skipped = set(skip or ())
        converted: dict[str, Any] = {}
        for key, value in obj.items():
            if key in skipped:
                converted[key] = value
            else:
                converted[to_camel_case(key)] = any_to_camel_case(value)
        return converted
    return obj


def get_acronym(name: str | None) -> str:
    """Return the guild-icon style acronym, e.g. ``"My Cool Server"`` -> ``"MCS"``."""
    if name is None:
        return ""
    return re.sub(r"\s", "", re.sub(r"\w+", lambda m: m.group(0)[0], name, flags=re.ASCII))


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def add_query(url: str, query: dict[str, Any] | None = None) -> str:
    """Append *query* to *url*, skipping ``None`` values."""
    if not query:
        return url
    params = {
        key: (str(value).lower() if isinstance(value, bool) else value)
        for key, value in query.items()
        if value is not None
    }
    encoded = urlencode(params)
    if not encoded:
        return url
    return f"{url}&{encoded}" if "?" in url else f"{url}?{encoded}"


def get_format_from_hash(
    asset_hash: str,
    fmt: str | None = None,
    default: str = ImageFormat.PNG.value,
) -> str:
    """Pick the image format for a CDN asset hash.

    An explicit *fmt* wins; otherwise animated hashes (``a_`` prefix) are
    served as GIF and everything else as *default*.

    Raises:
        InvalidImageFormat: the chosen format is not an ``ImageFormat``.
    """
    if fmt:
        fmt = fmt.lower()
    else:
        fmt = ImageFormat.GIF.value if asset_hash.startswith(ANIMATED_HASH_PREFIX) else default
    if fmt not in IMAGE_FORMATS:
        raise InvalidImageFormat(fmt, list(IMAGE_FORMATS))
    return fmt


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------


def rgb_to_int(r: int, g: int, b: int) -> int:
    return discord.Colour.from_rgb(r & 0xFF, g & 0xFF, b & 0xFF).value


def int_to_rgb(value: int) -> tuple[int, int, int]:
    return discord.Colour(value).to_rgb()


def hex_to_int(value: str) -> int:
    return int(value.replace("#", ""), 16)


def int_to_hex(value: int, hashtag: bool = False) -> str:
    """Format *value* as six hex digits, optionally with a leading ``#``."""
    text = str(discord.Colour(value))
    return text if hashtag else text.lstrip("#")


# ---------------------------------------------------------------------------
# Snowflakes
# ---------------------------------------------------------------------------


def snowflake_to_datetime(snowflake: int | str) -> datetime:
    """Return the UTC creation time encoded in a snowflake id."""
    return discord.utils.snowflake_time(int(snowflake))


def guild_id_to_shard_id(guild_id: int | str, shard_count: int) -> int:
    """Return the gateway shard that receives events for *guild_id*."""
    if shard_count <= 0:
        raise ValueError(f"shard_count must be positive, got {shard_count}")
    return (int(guild_id) >> 22) % shard_count
