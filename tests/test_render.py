from __future__ import annotations

from ethsend.core.model import (
    ConnectionClosed,
    MessageSent,
    Protocol,
    ReceiveTimedOut,
    ResolvedRequest,
    ResponseReceived,
)
from ethsend.render import describe_request, format_hex, render_event


def test_format_hex_is_space_separated_two_digit() -> None:
    assert format_hex(b"\x00\x0f\xa0\xff") == "00 0f a0 ff"
    assert format_hex(b"") == ""


def test_describe_broadcast_request() -> None:
    request = ResolvedRequest(
        target_address="192.168.1.255",
        target_port=5000,
        protocol=Protocol.UDP_BROADCAST,
        suppress_response=False,
        payload=b"hi\x00",
        raw_payload=r"hi\x00",
    )
    assert describe_request(request) == [
        "Sending UDP message to 192.168.1.255:5000 (broadcast)",
        r"Message is 'hi\x00'",
    ]


def test_describe_tcp_request() -> None:
    request = ResolvedRequest("127.0.0.1", 80, Protocol.TCP, False, b"x", raw_payload="x")
    assert describe_request(request)[0] == "Sending TCP message to 127.0.0.1:80"


def test_render_events() -> None:
    sent = MessageSent(protocol=Protocol.UDP, address="127.0.0.1", port=9000, size=5)
    assert render_event(sent) == "Message sent (5 bytes), waiting for response"
    assert render_event(sent, suppress_response=True) == "Message sent (5 bytes)"
    assert (
        render_event(ResponseReceived(address="10.0.0.1", port=53, data=b"\x12\x34"))
        == "Response (2 bytes) from 10.0.0.1:53 = 12 34"
    )
    assert render_event(ConnectionClosed()) == "Connection closed by remote"
    assert render_event(ReceiveTimedOut(timeout_s=1.5)) == "No further response within 1.5 s"
