"""Stable public API for building tooling on top of ethsend.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ethsend.core.errors import (
    ConfigLoadError,
    ConfigValidationError,
    EthsendError,
    InvalidAddressError,
    InvalidAddressLengthError,
    InvalidPortError,
    MalformedEscapeError,
    TransportCreateError,
    TransportError,
    TransportReceiveError,
    TransportSendError,
    TransportTimeoutError,
    UnknownProtocolError,
    UsageError,
)
from ethsend.core.magic_packet import build_magic_packet
from ethsend.core.model import (
    ConnectionClosed,
    MessageSent,
    Protocol,
    ReceiveTimedOut,
    ResolvedRequest,
    ResponseReceived,
    SessionEvent,
    SessionState,
    Settings,
)
from ethsend.core.payload import decode_payload
from ethsend.core.protocol import select_protocol
from ethsend.core.resolver import IGNORE_RESPONSE_FLAG, resolve_invocation, resolve_request
from ethsend.core.session import Session
from ethsend.transports.base import Socket, Transport
from ethsend.transports.inet import InetTransport

__all__ = [
    "EthsendError",
    "UsageError",
    "InvalidPortError",
    "UnknownProtocolError",
    "InvalidAddressError",
    "InvalidAddressLengthError",
    "MalformedEscapeError",
    "ConfigLoadError",
    "ConfigValidationError",
    "TransportError",
    "TransportCreateError",
    "TransportSendError",
    "TransportReceiveError",
    "TransportTimeoutError",
    "ConnectionClosed",
    "MessageSent",
    "Protocol",
    "ReceiveTimedOut",
    "ResolvedRequest",
    "ResponseReceived",
    "SessionEvent",
    "SessionState",
    "Settings",
    "Session",
    "Socket",
    "Transport",
    "InetTransport",
    "build_magic_packet",
    "decode_payload",
    "select_protocol",
    "Client",
]


class Client:
    """Public client for resolving and sending single messages.

    Each call to :meth:`send` runs its own :class:`Session` with its own
    socket; nothing is shared between calls.
    """

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._transport = transport or InetTransport()
        self._settings = settings or Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def resolve(
        self,
        address: str,
        port: str | int,
        protocol: str,
        payload: Sequence[str],
        *,
        ignore_response: bool = False,
    ) -> ResolvedRequest:
        tokens = list(payload)
        if ignore_response:
            tokens.insert(0, IGNORE_RESPONSE_FLAG)
        return resolve_request(
            address,
            str(port),
            protocol,
            tokens,
            broadcast_lookup=self._transport.broadcast_address,
        )

    def resolve_argv(self, tokens: Sequence[str]) -> ResolvedRequest:
        return resolve_invocation(tokens, broadcast_lookup=self._transport.broadcast_address)

    def open_session(self, request: ResolvedRequest) -> Session:
        return Session(
            request,
            self._transport,
            buffer_size=self._settings.receive_buffer_size,
            timeout_s=self._settings.receive_timeout_s,
        )

    def send(self, request: ResolvedRequest) -> Iterator[SessionEvent]:
        return self.open_session(request).run()
