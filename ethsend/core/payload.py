"""Decoding of textual payloads carrying \\xHH byte escapes."""

from __future__ import annotations

import string

from ethsend.core.errors import MalformedEscapeError

ESCAPE_MARKER = "\\x"
_HEX_DIGITS = frozenset(string.hexdigits)


def _encode_literal(text: str) -> bytes:
    # surrogateescape hands undecodable argv bytes back unchanged
    return text.encode("utf-8", "surrogateescape")


def decode_payload(text: str) -> bytes:
    """Replace every ``\\xHH`` token in ``text`` with the byte it encodes.

    Everything else is copied verbatim, so text without escapes decodes to
    its own encoding. Raises :class:`MalformedEscapeError` when a marker is
    not followed by exactly two hex digits.
    """
    buffer = bytearray()
    last = 0
    pos = text.find(ESCAPE_MARKER)
    while pos != -1:
        buffer += _encode_literal(text[last:pos])
        digits = text[pos + 2 : pos + 4]
        if len(digits) != 2 or not all(c in _HEX_DIGITS for c in digits):
            raise MalformedEscapeError(
                f"Malformed escape at position {pos}: expected two hex digits after '\\x', "
                f"got {digits!r}",
                position=pos,
            )
        buffer.append(int(digits, 16))
        last = pos + 4
        pos = text.find(ESCAPE_MARKER, last)
    buffer += _encode_literal(text[last:])
    return bytes(buffer)
