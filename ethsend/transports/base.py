"""Transport interfaces."""

from __future__ import annotations

from typing import Protocol

from ethsend.core.model import SocketKind


class Socket(Protocol):
    def enable_broadcast(self) -> None:
        """Set SO_BROADCAST before the first datagram is sent."""

    def send(self, payload: bytes) -> None:
        """Send the whole payload on a connected stream."""

    def send_to(self, payload: bytes, address: str, port: int) -> None:
        """Send the payload as one datagram."""

    def set_blocking(self, flag: bool) -> None: ...

    def set_timeout(self, timeout_s: float | None) -> None: ...

    def receive(self, bufsize: int) -> tuple[bytes, str, int]:
        """Block for the next chunk; returns ``(data, sender_address, sender_port)``."""

    def close(self) -> None: ...


class Transport(Protocol):
    def open(self, kind: SocketKind, address: str, port: int) -> Socket:
        """Create a socket; stream sockets are connected to ``address:port``."""

    def broadcast_address(self, address: str) -> str | None:
        """Return the local broadcast address of the subnet containing ``address``."""
