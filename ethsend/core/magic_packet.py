"""Wake-on-LAN magic packet construction."""

from __future__ import annotations

from ethsend.core.errors import InvalidAddressLengthError

MAC_ADDRESS_SIZE = 6
_SYNC_STREAM = b"\xff" * 6
_REPETITIONS = 16


def build_magic_packet(mac: bytes) -> bytes:
    """Return ``[FF x 6] + [mac] x 16`` (102 bytes) for a 6-byte hardware address."""
    if len(mac) != MAC_ADDRESS_SIZE:
        raise InvalidAddressLengthError(
            f"Hardware address must be {MAC_ADDRESS_SIZE} bytes, got {len(mac)}"
        )
    return _SYNC_STREAM + bytes(mac) * _REPETITIONS
