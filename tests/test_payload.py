from __future__ import annotations

import pytest

from ethsend.core.errors import MalformedEscapeError
from ethsend.core.payload import decode_payload


@pytest.mark.parametrize("text", ["", "hello", "hello world", "x41", "back\\slash", "\\X41"])
def test_payload_without_escapes_is_unchanged(text: str) -> None:
    assert decode_payload(text) == text.encode("ascii")


def test_single_escape_between_literals() -> None:
    assert decode_payload(r"A\x42B") == bytes([0x41, 0x42, 0x42])


def test_escapes_are_case_insensitive() -> None:
    assert decode_payload(r"\xaB\xFf\x0a") == b"\xab\xff\x0a"


@pytest.mark.parametrize(
    ("text", "escapes"),
    [
        (r"\x00\x11\x22\x33\x44\x55", 6),
        (r"GET / \x0d\x0a", 2),
        (r"\\x41", 1),
        (r"a\x20b c", 1),
    ],
)
def test_decoded_length_drops_three_chars_per_escape(text: str, escapes: int) -> None:
    assert len(decode_payload(text)) == len(text) - 3 * escapes


def test_escape_followed_by_more_digits_only_consumes_two() -> None:
    assert decode_payload(r"\x4142") == b"A42"


@pytest.mark.parametrize(
    ("text", "position"),
    [
        ("\\x", 0),
        ("ab\\x4", 2),
        ("\\xZZ", 0),
        ("ok\\x41\\x4g", 6),
        ("\\x 1", 0),
        ("\\x+f", 0),
    ],
)
def test_malformed_escape_reports_position(text: str, position: int) -> None:
    with pytest.raises(MalformedEscapeError) as exc:
        decode_payload(text)
    assert exc.value.position == position
    assert f"position {position}" in str(exc.value)


def test_non_ascii_text_is_utf8_encoded() -> None:
    assert decode_payload("café\\x21") == "café!".encode("utf-8")
