# edge_netcore/core/selector.py
"""
Address & Port Selector
Deterministic, load-spreading choice of management ports and local addresses

Selection is filter -> ordered concatenation -> index with wraparound:
free-port addresses are always listed before non-free ones, so a low pick
index prefers free uplinks and an incrementing index round-robins across
all of them. Nothing here mutates the snapshot or performs I/O.
"""

import ipaddress
import logging
from typing import List, Optional, Sequence, TypeVar, Union

from ..schemas.port import AddrInfo, DeviceNetworkStatus, NetworkPortStatus
from .classifier import resolve_adapter_name
from .errors import NoAddressAvailable

logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

T = TypeVar("T")


def rotate(seq: Sequence[T], amount: int) -> List[T]:
    """
    Rotate left by amount modulo the length
    An empty sequence rotates to an empty list
    """
    if not seq:
        return []
    amount = amount % len(seq)
    return list(seq[amount:]) + list(seq[:amount])


# === Management ports ===

def list_management_ports(
    status: DeviceNetworkStatus,
    rotation: int = 0,
    free_only: bool = False,
    non_free_only: bool = False,
) -> List[str]:
    """
    Interface names of the management ports, in status order, rotated

    Args:
        status: Device network status snapshot
        rotation: Rotation offset; increment it between calls to round-robin
        free_only: Only free ports
        non_free_only: Only non-free ports

    Raises:
        ValueError: If both free_only and non_free_only are set
    """
    if free_only and non_free_only:
        raise ValueError("free_only and non_free_only are mutually exclusive")
    ports = []
    for port in status.ports:
        if free_only and not port.free:
            continue
        if non_free_only and port.free:
            continue
        if not status.is_mgmt_eligible(port):
            continue
        ports.append(port.if_name)
    return rotate(ports, rotation)


def management_ports_any(status: DeviceNetworkStatus, rotation: int = 0) -> List[str]:
    return list_management_ports(status, rotation)


def management_ports_free(status: DeviceNetworkStatus, rotation: int = 0) -> List[str]:
    return list_management_ports(status, rotation, free_only=True)


def management_ports_non_free(status: DeviceNetworkStatus, rotation: int = 0) -> List[str]:
    return list_management_ports(status, rotation, non_free_only=True)


# === Addresses ===

def _resolve_port(status: DeviceNetworkStatus, port: str) -> str:
    if not port:
        return ""
    return resolve_adapter_name(status, port).if_name


def _canonical(addr: IPAddress) -> IPAddress:
    """IPv4-mapped IPv6 addresses are handled as the IPv4 address they carry"""
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    return addr


def _usable(addr_info: AddrInfo, include_link_local: bool) -> bool:
    return include_link_local or not _canonical(addr_info.addr).is_link_local


def _candidate_ports(status: DeviceNetworkStatus, free_only: bool, if_name: str):
    for port in status.ports:
        if free_only and not port.free:
            continue
        if not status.is_mgmt_eligible(port):
            continue
        if if_name and port.if_name != if_name:
            continue
        yield port


def eligible_addresses(
    status: DeviceNetworkStatus,
    free_only: bool = False,
    port: str = "",
    include_link_local: bool = False,
) -> List[IPAddress]:
    """
    Addresses of the management ports, free ports first

    Args:
        status: Device network status snapshot
        free_only: Only addresses of free ports
        port: Restrict to this port (logical or interface name); empty for all
        include_link_local: Keep link-local unicast addresses
    """
    if_name = _resolve_port(status, port)
    free_addrs = []
    non_free_addrs = []
    for p in _candidate_ports(status, free_only, if_name):
        addrs = [a.addr for a in p.addr_info_list if _usable(a, include_link_local)]
        if p.free:
            free_addrs.extend(addrs)
        else:
            non_free_addrs.extend(addrs)
    return free_addrs + non_free_addrs


def select_address(
    status: DeviceNetworkStatus,
    pick_index: int = 0,
    port: str = "",
    free_only: bool = False,
    include_link_local: bool = False,
) -> IPAddress:
    """
    Pick one local address from the management ports

    Args:
        status: Device network status snapshot
        pick_index: Index into the eligible addresses, modulo their count
        port: Restrict to this port (logical or interface name); empty for all
        free_only: Only addresses of free ports
        include_link_local: Keep link-local unicast addresses

    Returns:
        The picked address

    Raises:
        NoAddressAvailable: If no address qualifies
    """
    addrs = eligible_addresses(status, free_only, port, include_link_local)
    if not addrs:
        raise NoAddressAvailable(
            "No good IP address",
            {"port": port, "free_only": free_only, "include_link_local": include_link_local},
        )
    return addrs[pick_index % len(addrs)]


def local_addr_any(status: DeviceNetworkStatus, pick_index: int = 0, port: str = "") -> IPAddress:
    """Any management address, link-local included"""
    return select_address(status, pick_index, port, free_only=False, include_link_local=True)


def local_addr_any_no_link_local(status: DeviceNetworkStatus, pick_index: int = 0, port: str = "") -> IPAddress:
    """Any management address except link-local ones"""
    return select_address(status, pick_index, port, free_only=False, include_link_local=False)


def local_addr_free_no_link_local(status: DeviceNetworkStatus, pick_index: int = 0, port: str = "") -> IPAddress:
    """A free management address, link-local excluded"""
    return select_address(status, pick_index, port, free_only=True, include_link_local=False)


def count_local_addr_any_no_link_local(status: DeviceNetworkStatus, port: str = "") -> int:
    """Number of non link-local addresses on the management ports (or on one port)"""
    return len(eligible_addresses(status, free_only=False, port=port, include_link_local=False))


def count_local_addr_free_no_link_local(status: DeviceNetworkStatus) -> int:
    """Number of non link-local addresses on the free management ports"""
    return len(eligible_addresses(status, free_only=True, include_link_local=False))


def management_ports_free_no_link_local(status: DeviceNetworkStatus) -> List[NetworkPortStatus]:
    """
    Free management ports having at least one non link-local address
    Each record is trimmed to if_name, name and those addresses
    """
    ports = []
    for p in _candidate_ports(status, free_only=True, if_name=""):
        addrs = [a for a in p.addr_info_list if _usable(a, False)]
        if addrs:
            ports.append(NetworkPortStatus(if_name=p.if_name, name=p.name, addr_info_list=addrs))
    return ports


# === Reverse lookup ===

def reverse_lookup_port(status: DeviceNetworkStatus, addr: Union[str, IPAddress]) -> Optional[str]:
    """
    Interface name of the management port owning an address
    Maps the local address of an outbound connection back to its uplink

    Returns:
        The interface name, or None if no management port has the address
    """
    wanted = _canonical(ipaddress.ip_address(addr))
    for port in status.ports:
        if not status.is_mgmt_eligible(port):
            continue
        for addr_info in port.addr_info_list:
            if _canonical(addr_info.addr) == wanted:
                return port.if_name
    logger.debug(f"reverse_lookup_port: no management port owns {wanted}")
    return None
