"""Argument resolution: raw invocation tokens to a validated request."""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Callable, Sequence

from ethsend.core.errors import (
    InvalidAddressError,
    InvalidAddressLengthError,
    InvalidPortError,
    UnknownProtocolError,
    UsageError,
)
from ethsend.core.magic_packet import MAC_ADDRESS_SIZE, build_magic_packet
from ethsend.core.model import Protocol, ResolvedRequest
from ethsend.core.payload import decode_payload
from ethsend.core.protocol import protocol_tokens, select_protocol

IGNORE_RESPONSE_FLAG = "--ignore-response"
LOGGER = logging.getLogger(__name__)

BroadcastLookup = Callable[[str], str | None]


def parse_port(token: str) -> int:
    if not token.isascii() or not token.isdigit():
        raise InvalidPortError(f"Failed to parse port number '{token}'")
    port = int(token)
    if port == 0 or port > 0xFFFF:
        raise InvalidPortError(f"Port must be between 1 and 65535, got '{token}'")
    return port


def _literal_address(address: str) -> str:
    try:
        return str(ipaddress.IPv4Address(address))
    except ValueError as exc:
        raise InvalidAddressError(f"'{address}' is not an IPv4 address") from exc


def resolve_request(
    address: str,
    port: str,
    protocol: str,
    tokens: Sequence[str],
    *,
    broadcast_lookup: BroadcastLookup,
) -> ResolvedRequest:
    """Resolve the positional invocation tokens into a :class:`ResolvedRequest`.

    ``tokens`` holds everything after the protocol: an optional leading
    ``--ignore-response`` flag followed by the payload words. No socket is
    touched here; ``broadcast_lookup`` is only called for broadcast protocols.
    """
    target_port = parse_port(port)

    selected = select_protocol(protocol)
    if selected is Protocol.UNKNOWN:
        allowed = ", ".join(protocol_tokens())
        raise UnknownProtocolError(f"Unknown protocol '{protocol}'. Allowed: {allowed}")

    if selected.requires_broadcast:
        target_address = broadcast_lookup(address)
        if not target_address:
            raise InvalidAddressError(f"Could not determine a broadcast address for '{address}'")
        LOGGER.debug("Using broadcast address %s for %s", target_address, address)
    else:
        target_address = _literal_address(address)

    remaining = list(tokens)
    ignore_requested = bool(remaining) and remaining[0] == IGNORE_RESPONSE_FLAG
    if ignore_requested:
        remaining = remaining[1:]
    suppress_response = ignore_requested or selected is Protocol.WOL

    raw_payload = " ".join(remaining)
    payload = decode_payload(raw_payload)

    if selected is Protocol.WOL:
        if len(payload) != MAC_ADDRESS_SIZE:
            raise InvalidAddressLengthError(
                f"Wake-on-LAN payload must decode to a {MAC_ADDRESS_SIZE}-byte hardware address, "
                f"got {len(payload)} bytes"
            )
        payload = build_magic_packet(payload)

    return ResolvedRequest(
        target_address=target_address,
        target_port=target_port,
        protocol=selected,
        suppress_response=suppress_response,
        payload=payload,
        raw_payload=raw_payload,
    )


def resolve_invocation(tokens: Sequence[str], *, broadcast_lookup: BroadcastLookup) -> ResolvedRequest:
    """Resolve the full positional argument list ``<ip> <port> <protocol> [flag] <payload...>``."""
    if len(tokens) < 4:
        raise UsageError(f"Expected at least 4 arguments, got {len(tokens)}")
    address, port, protocol, *rest = tokens
    if rest == [IGNORE_RESPONSE_FLAG]:
        raise UsageError("Expected at least one payload word after --ignore-response")
    return resolve_request(address, port, protocol, rest, broadcast_lookup=broadcast_lookup)
