"""Protocol token selection."""

from __future__ import annotations

from ethsend.core.model import Protocol

_TOKENS = {
    "tcp": Protocol.TCP,
    "udp": Protocol.UDP,
    "udp-broadcast": Protocol.UDP_BROADCAST,
    "wol": Protocol.WOL,
}


def select_protocol(token: str) -> Protocol:
    return _TOKENS.get(token, Protocol.UNKNOWN)


def protocol_tokens() -> tuple[str, ...]:
    return tuple(_TOKENS)
