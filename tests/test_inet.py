from __future__ import annotations

import socket

import pytest

from ethsend.core.errors import TransportCreateError, TransportTimeoutError
from ethsend.core.model import SocketKind
from ethsend.transports.inet import InetTransport


def _closed_port() -> int:
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_socket_creation_failure_raises_clean_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _deny(*args, **kwargs):
        raise PermissionError(1, "Operation not permitted")

    monkeypatch.setattr(socket, "socket", _deny)

    with pytest.raises(TransportCreateError, match="Operation not permitted"):
        InetTransport().open(SocketKind.DATAGRAM, "127.0.0.1", 9)


def test_udp_round_trip_over_loopback() -> None:
    peer = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    peer.bind(("127.0.0.1", 0))
    peer.settimeout(2)
    peer_port = peer.getsockname()[1]

    sock = InetTransport().open(SocketKind.DATAGRAM, "127.0.0.1", peer_port)
    try:
        sock.send_to(b"ping", "127.0.0.1", peer_port)
        data, sender = peer.recvfrom(64)
        assert data == b"ping"

        peer.sendto(b"pong", sender)
        sock.set_timeout(2)
        assert sock.receive(64) == (b"pong", "127.0.0.1", peer_port)
    finally:
        sock.close()
        peer.close()


def test_udp_receive_deadline() -> None:
    sock = InetTransport().open(SocketKind.DATAGRAM, "127.0.0.1", 9)
    try:
        sock.set_timeout(0.05)
        with pytest.raises(TransportTimeoutError):
            sock.receive(64)
    finally:
        sock.close()


def test_tcp_exchange_and_orderly_close() -> None:
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]

    sock = InetTransport().open(SocketKind.STREAM, "127.0.0.1", port)
    conn, _ = listener.accept()
    try:
        sock.send(b"hello")
        conn.settimeout(2)
        assert conn.recv(16) == b"hello"

        conn.sendall(b"ok")
        conn.close()
        sock.set_timeout(2)
        assert sock.receive(16) == (b"ok", "127.0.0.1", port)
        assert sock.receive(16) == (b"", "127.0.0.1", port)
    finally:
        sock.close()
        listener.close()


def test_tcp_connect_refused() -> None:
    with pytest.raises(TransportCreateError, match="Could not open stream socket"):
        InetTransport().open(SocketKind.STREAM, "127.0.0.1", _closed_port())
