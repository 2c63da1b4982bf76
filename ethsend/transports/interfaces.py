"""Broadcast address lookup over the local IPv4 interfaces."""

from __future__ import annotations

import ipaddress
import logging

import netifaces

LIMITED_BROADCAST = "255.255.255.255"
LOGGER = logging.getLogger(__name__)


def _ipv4_entries() -> list[dict[str, str]]:
    entries: list[dict[str, str]] = []
    for ifname in netifaces.interfaces():
        address_info = netifaces.ifaddresses(ifname)
        if address_info is not None and netifaces.AF_INET in address_info:
            entries.extend(address_info[netifaces.AF_INET])
    return entries


def broadcast_address_for(address: str) -> str | None:
    """Return the broadcast address of the local subnet that contains ``address``.

    Interfaces are scanned in enumeration order and the first IPv4 network
    (interface address + netmask) containing the target wins. The reported
    broadcast address is preferred; without one it is derived from the
    netmask. Returns ``None`` when ``address`` is not IPv4 or lies on no
    local subnet.
    """
    try:
        target = ipaddress.IPv4Address(address)
    except ValueError:
        return None

    if str(target) == LIMITED_BROADCAST:
        return LIMITED_BROADCAST

    for entry in _ipv4_entries():
        if_addr = entry.get("addr")
        netmask = entry.get("netmask")
        if not if_addr or not netmask:
            continue
        try:
            network = ipaddress.IPv4Network(f"{if_addr}/{netmask}", strict=False)
        except ValueError:
            LOGGER.debug("Skipping interface address %s/%s", if_addr, netmask)
            continue
        if target in network:
            broadcast = entry.get("broadcast") or str(network.broadcast_address)
            LOGGER.debug("Resolved broadcast address %s for %s via %s", broadcast, address, network)
            return broadcast

    return None
