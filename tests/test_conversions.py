"""Tests for the stateless conversion helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from discord_content.errors import InvalidImageFormat
from discord_content.utils.conversions import (
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


class TestCamelCase:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("guild_id", "guildId"),
            ("HELLO_WORLD", "helloWorld"),
            ("already", "already"),
            ("alreadyCamel", "alreadyCamel"),
            ("a_b_c", "aBC"),
        ],
    )
    def test_to_camel_case(self, value: str, expected: str) -> None:
        assert to_camel_case(value) == expected

    def test_nested_structures(self) -> None:
        payload = {
            "user_id": 1,
            "nested_obj": {"inner_key": [{"deep_key": 2}]},
            "raw_data": {"keep_me": 1},
        }
        assert any_to_camel_case(payload, skip=["raw_data"]) == {
            "userId": 1,
            "nestedObj": {"innerKey": [{"deepKey": 2}]},
            "raw_data": {"keep_me": 1},
        }

    def test_scalars_pass_through(self) -> None:
        assert any_to_camel_case(None) is None
        assert any_to_camel_case("snake_case") == "snake_case"
        assert any_to_camel_case(3) == 3


class TestAcronym:
    def test_words(self) -> None:
        assert get_acronym("My Cool Server") == "MCS"

    def test_punctuation_kept(self) -> None:
        assert get_acronym("discord.py Server") == "d.pS"

    def test_none(self) -> None:
        assert get_acronym(None) == ""


class TestAddQuery:
    def test_no_query(self) -> None:
        assert add_query("https://x.io/a") == "https://x.io/a"
        assert add_query("https://x.io/a", {}) == "https://x.io/a"

    def test_none_values_dropped(self) -> None:
        assert add_query("https://x.io/a", {"size": 128, "format": None}) == "https://x.io/a?size=128"
        assert add_query("https://x.io/a", {"format": None}) == "https://x.io/a"

    def test_existing_query_string(self) -> None:
        assert add_query("https://x.io/a?v=1", {"size": 64}) == "https://x.io/a?v=1&size=64"

    def test_booleans_lowercased(self) -> None:
        assert add_query("https://x.io", {"with_counts": True}) == "https://x.io?with_counts=true"


class TestImageFormat:
    def test_default_png(self) -> None:
        assert get_format_from_hash("abc123") == ImageFormat.PNG.value

    def test_animated_hash_is_gif(self) -> None:
        assert get_format_from_hash("a_abc123") == "gif"

    def test_explicit_format_wins(self) -> None:
        assert get_format_from_hash("a_abc123", "WEBP") == "webp"

    def test_custom_default(self) -> None:
        assert get_format_from_hash("abc", default="jpg") == "jpg"

    def test_invalid_format(self) -> None:
        with pytest.raises(InvalidImageFormat) as exc_info:
            get_format_from_hash("abc", "bmp")
        assert exc_info.value.format == "bmp"


class TestColours:
    def test_rgb_to_int(self) -> None:
        assert rgb_to_int(255, 0, 0) == 0xFF0000
        assert rgb_to_int(0x12, 0x34, 0x56) == 0x123456

    def test_rgb_to_int_masks_channels(self) -> None:
        assert rgb_to_int(0x1FF, 0, 0) == 0xFF0000

    def test_int_to_rgb(self) -> None:
        assert int_to_rgb(0x123456) == (0x12, 0x34, 0x56)

    def test_hex_to_int(self) -> None:
        assert hex_to_int("#ff00ff") == 0xFF00FF
        assert hex_to_int("5865F2") == 0x5865F2

    def test_int_to_hex(self) -> None:
        assert int_to_hex(255) == "0000ff"
        assert int_to_hex(0x5865F2, hashtag=True) == "#5865f2"


class TestSnowflakes:
    def test_snowflake_time(self) -> None:
        expected = datetime(2015, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
        assert snowflake_to_datetime(str(1000 << 22)) == expected
        assert snowflake_to_datetime(1000 << 22) == expected

    def test_shard_id(self) -> None:
        assert guild_id_to_shard_id(5 << 22, 3) == 2
        assert guild_id_to_shard_id(str(5 << 22), 1) == 0

    def test_shard_count_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            guild_id_to_shard_id(1, 0)
