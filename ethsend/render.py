"""Text rendering of requests and session events for the CLI."""

from __future__ import annotations

from ethsend.core.model import (
    ConnectionClosed,
    MessageSent,
    Protocol,
    ReceiveTimedOut,
    ResolvedRequest,
    ResponseReceived,
    SessionEvent,
    SocketKind,
)

_SUFFIXES = {
    Protocol.UDP_BROADCAST: " (broadcast)",
    Protocol.WOL: " (wake-on-lan)",
}


def format_hex(data: bytes) -> str:
    return data.hex(" ")


def describe_request(request: ResolvedRequest) -> list[str]:
    transport = "TCP" if request.protocol.socket_kind is SocketKind.STREAM else "UDP"
    suffix = _SUFFIXES.get(request.protocol, "")
    return [
        f"Sending {transport} message to {request.target_address}:{request.target_port}{suffix}",
        f"Message is '{request.raw_payload}'",
    ]


def render_event(event: SessionEvent, *, suppress_response: bool = False) -> str:
    if isinstance(event, MessageSent):
        if suppress_response:
            return f"Message sent ({event.size} bytes)"
        return f"Message sent ({event.size} bytes), waiting for response"
    if isinstance(event, ResponseReceived):
        return (
            f"Response ({len(event.data)} bytes) from {event.address}:{event.port} = "
            f"{format_hex(event.data)}"
        )
    if isinstance(event, ConnectionClosed):
        return "Connection closed by remote"
    if isinstance(event, ReceiveTimedOut):
        return f"No further response within {event.timeout_s:g} s"
    raise TypeError(f"Unsupported session event {event!r}")
