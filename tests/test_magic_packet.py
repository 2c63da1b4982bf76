from __future__ import annotations

import pytest

from ethsend.core.errors import InvalidAddressLengthError
from ethsend.core.magic_packet import build_magic_packet


@pytest.mark.parametrize("mac", [bytes.fromhex("001122334455"), b"\xff" * 6, bytes(6)])
def test_magic_packet_layout(mac: bytes) -> None:
    packet = build_magic_packet(mac)
    assert len(packet) == 102
    assert packet[:6] == b"\xff" * 6
    for k in range(16):
        assert packet[6 + 6 * k : 12 + 6 * k] == mac


@pytest.mark.parametrize("size", [0, 5, 7, 12])
def test_magic_packet_rejects_wrong_length(size: int) -> None:
    with pytest.raises(InvalidAddressLengthError):
        build_magic_packet(b"\x01" * size)
