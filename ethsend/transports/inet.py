"""IPv4 TCP/UDP transport implementation using Python sockets."""

from __future__ import annotations

import logging
import socket

from ethsend.core.errors import (
    TransportCreateError,
    TransportReceiveError,
    TransportSendError,
    TransportTimeoutError,
)
from ethsend.core.model import SocketKind
from ethsend.transports.interfaces import broadcast_address_for

LOGGER = logging.getLogger(__name__)


class InetSocket:
    def __init__(self, sock: socket.socket, kind: SocketKind, peer: tuple[str, int] | None = None) -> None:
        self._sock = sock
        self._kind = kind
        self._peer = peer

    def enable_broadcast(self) -> None:
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as exc:
            raise TransportCreateError(f"Could not enable broadcast: {exc}") from exc

    def send(self, payload: bytes) -> None:
        try:
            self._sock.sendall(payload)
        except OSError as exc:
            raise TransportSendError(f"TCP send failed: {exc}") from exc

    def send_to(self, payload: bytes, address: str, port: int) -> None:
        try:
            sent = self._sock.sendto(payload, (address, port))
        except OSError as exc:
            raise TransportSendError(f"UDP send to {address}:{port} failed: {exc}") from exc
        if sent != len(payload):
            raise TransportSendError(f"UDP send to {address}:{port} truncated ({sent} of {len(payload)} bytes)")

    def set_blocking(self, flag: bool) -> None:
        self._sock.setblocking(flag)

    def set_timeout(self, timeout_s: float | None) -> None:
        self._sock.settimeout(timeout_s)

    def receive(self, bufsize: int) -> tuple[bytes, str, int]:
        try:
            if self._kind is SocketKind.STREAM:
                data = self._sock.recv(bufsize)
                address, port = self._peer or ("", 0)
                return data, address, port
            data, (address, port) = self._sock.recvfrom(bufsize)
            return data, address, port
        except TimeoutError as exc:
            raise TransportTimeoutError("Receive timed out") from exc
        except OSError as exc:
            raise TransportReceiveError(f"Receive failed: {exc}") from exc

    def close(self) -> None:
        self._sock.close()


class InetTransport:
    def open(self, kind: SocketKind, address: str, port: int) -> InetSocket:
        sock_type = socket.SOCK_STREAM if kind is SocketKind.STREAM else socket.SOCK_DGRAM
        try:
            sock = socket.socket(socket.AF_INET, sock_type)
        except OSError as exc:
            raise TransportCreateError(f"Could not create {kind.value} socket: {exc}") from exc

        try:
            if kind is SocketKind.STREAM:
                sock.connect((address, port))
                peer = sock.getpeername()
                LOGGER.debug("Connected to %s:%d", peer[0], peer[1])
                return InetSocket(sock, kind, peer=(peer[0], peer[1]))
            sock.bind(("", 0))
            LOGGER.debug("Bound datagram socket to %s:%d", *sock.getsockname())
            return InetSocket(sock, kind)
        except OSError as exc:
            sock.close()
            raise TransportCreateError(f"Could not open {kind.value} socket to {address}:{port}: {exc}") from exc

    def broadcast_address(self, address: str) -> str | None:
        return broadcast_address_for(address)
