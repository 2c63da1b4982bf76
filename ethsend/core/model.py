"""Core data models used across resolver, session, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ethsend.core.errors import InvalidAddressLengthError, InvalidPortError, UnknownProtocolError

MAGIC_PACKET_SIZE = 102


class SocketKind(Enum):
    STREAM = "stream"
    DATAGRAM = "datagram"


class Protocol(Enum):
    TCP = "tcp"
    UDP = "udp"
    UDP_BROADCAST = "udp-broadcast"
    WOL = "wol"
    UNKNOWN = "unknown"

    @property
    def socket_kind(self) -> SocketKind:
        if self is Protocol.TCP:
            return SocketKind.STREAM
        return SocketKind.DATAGRAM

    @property
    def requires_broadcast(self) -> bool:
        return self in (Protocol.UDP_BROADCAST, Protocol.WOL)


class SessionState(Enum):
    IDLE = "idle"
    SENDING = "sending"
    AWAITING_RESPONSE = "awaiting_response"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolvedRequest:
    target_address: str
    target_port: int
    protocol: Protocol
    suppress_response: bool
    payload: bytes
    raw_payload: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not 0 < self.target_port <= 0xFFFF:
            raise InvalidPortError(f"Port {self.target_port} is outside 1-65535")
        if self.protocol is Protocol.UNKNOWN:
            raise UnknownProtocolError("A resolved request cannot use an unknown protocol")
        if self.protocol is Protocol.WOL and len(self.payload) != MAGIC_PACKET_SIZE:
            raise InvalidAddressLengthError(
                f"Wake-on-LAN payload must be {MAGIC_PACKET_SIZE} bytes, got {len(self.payload)}"
            )


@dataclass(frozen=True)
class Settings:
    receive_buffer_size: int = 65535
    receive_timeout_s: float | None = None
    log_level: str = "WARNING"


@dataclass(frozen=True)
class MessageSent:
    protocol: Protocol
    address: str
    port: int
    size: int


@dataclass(frozen=True)
class ResponseReceived:
    address: str
    port: int
    data: bytes


@dataclass(frozen=True)
class ConnectionClosed:
    pass


@dataclass(frozen=True)
class ReceiveTimedOut:
    timeout_s: float


SessionEvent = MessageSent | ResponseReceived | ConnectionClosed | ReceiveTimedOut
