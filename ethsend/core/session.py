"""Send/receive session for a single resolved request."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ethsend.core.errors import TransportError, TransportTimeoutError
from ethsend.core.model import (
    ConnectionClosed,
    MessageSent,
    ReceiveTimedOut,
    ResolvedRequest,
    ResponseReceived,
    SessionEvent,
    SessionState,
    SocketKind,
)
from ethsend.transports.base import Socket, Transport

DEFAULT_BUFFER_SIZE = 65535
LOGGER = logging.getLogger(__name__)


class Session:
    """Sends one request and reports what comes back as a stream of events.

    The socket is opened when iteration starts and closed once iteration
    ends, whether it ends in ``DONE``, ``FAILED`` or because the caller
    stopped consuming events. Transport failures propagate as
    :class:`TransportError` after the state has moved to ``FAILED``.
    """

    def __init__(
        self,
        request: ResolvedRequest,
        transport: Transport,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        timeout_s: float | None = None,
    ) -> None:
        self.request = request
        self.state = SessionState.IDLE
        self._transport = transport
        self._buffer_size = buffer_size
        self._timeout_s = timeout_s
        self._started = False

    def run(self) -> Iterator[SessionEvent]:
        if self._started:
            raise RuntimeError("A session can only be run once")
        self._started = True
        return self._events()

    def _events(self) -> Iterator[SessionEvent]:
        request = self.request
        kind = request.protocol.socket_kind
        self.state = SessionState.SENDING

        try:
            sock = self._transport.open(kind, request.target_address, request.target_port)
        except TransportError:
            self.state = SessionState.FAILED
            raise

        try:
            yield from self._exchange(sock, kind)
        except TransportError:
            self.state = SessionState.FAILED
            raise
        finally:
            sock.close()

    def _exchange(self, sock: Socket, kind: SocketKind) -> Iterator[SessionEvent]:
        request = self.request
        if request.protocol.requires_broadcast:
            sock.enable_broadcast()
        if kind is SocketKind.STREAM:
            sock.send(request.payload)
        else:
            sock.send_to(request.payload, request.target_address, request.target_port)
        LOGGER.debug(
            "Sent %d bytes to %s:%d over %s",
            len(request.payload),
            request.target_address,
            request.target_port,
            request.protocol.value,
        )

        sent = MessageSent(
            protocol=request.protocol,
            address=request.target_address,
            port=request.target_port,
            size=len(request.payload),
        )
        if request.suppress_response:
            self.state = SessionState.DONE
            yield sent
            return

        self.state = SessionState.AWAITING_RESPONSE
        yield sent
        yield from self._receive(sock)

    def _receive(self, sock: Socket) -> Iterator[SessionEvent]:
        if self._timeout_s is None:
            sock.set_blocking(True)
        else:
            sock.set_timeout(self._timeout_s)

        while True:
            try:
                data, address, port = sock.receive(self._buffer_size)
            except TransportTimeoutError:
                LOGGER.debug("No data within %s s, ending receive loop", self._timeout_s)
                self.state = SessionState.DONE
                yield ReceiveTimedOut(timeout_s=self._timeout_s or 0.0)
                return

            if not data:
                self.state = SessionState.DONE
                yield ConnectionClosed()
                return

            yield ResponseReceived(address=address, port=port, data=data)
