# edge_netcore/core/classifier.py
"""
Port Classifier
Answers whether a name denotes a port, a management port or a free
management port, and maps operator-facing adapter names to interface names

Names match a port's logical name or its interface name, case-sensitive,
first match wins. An empty name matches nothing.
"""

import logging
from typing import List, NamedTuple, Optional

from ..config import settings
from ..schemas.port import DeviceNetworkStatus, NetworkPortStatus
from .errors import PortNotFound

logger = logging.getLogger(__name__)


class AdapterResolution(NamedTuple):
    """
    Result of resolving an adapter name
    matched_by is "name", "if_name" or None when the input was passed through
    """
    if_name: str
    matched_by: Optional[str]

    @property
    def resolved(self) -> bool:
        return self.matched_by is not None


def _matches(port: NetworkPortStatus, name: str) -> bool:
    return bool(name) and (port.name == name or port.if_name == name)


def _eligible_matches(status: DeviceNetworkStatus, name: str):
    for port in status.ports:
        if _matches(port, name) and status.is_mgmt_eligible(port):
            yield port


def is_port(status: DeviceNetworkStatus, name: str) -> bool:
    """Check if an interface/adapter name is a device port"""
    return any(_matches(port, name) for port in status.ports)


def is_management_port(status: DeviceNetworkStatus, name: str) -> bool:
    """Check if an interface/adapter name is a management port"""
    return lookup_management_port(status, name) is not None


def is_free_management_port(status: DeviceNetworkStatus, name: str) -> bool:
    """Check if an interface/adapter name is a free management port"""
    port = lookup_management_port(status, name)
    return port is not None and port.free


def lookup_management_port(status: DeviceNetworkStatus, name: str) -> Optional[NetworkPortStatus]:
    """
    Find the management port record for a name

    Returns:
        The first matching management port, or None when there is none
    """
    return next(_eligible_matches(status, name), None)


def resolve_adapter_name(status: DeviceNetworkStatus, name: str) -> AdapterResolution:
    """
    Resolve a logical port name to its interface name
    Logical names are tried first, then interface names; an unknown name
    comes back unchanged with matched_by None
    """
    if name:
        for port in status.ports:
            if port.name == name:
                logger.debug(f"resolve_adapter_name: found {port.if_name} for {name}")
                return AdapterResolution(port.if_name, "name")
        for port in status.ports:
            if port.if_name == name:
                logger.debug(f"resolve_adapter_name: matched {name}")
                return AdapterResolution(name, "if_name")
    logger.debug(f"resolve_adapter_name: no match for {name}")
    return AdapterResolution(name, None)


def adapter_to_ifname(status: DeviceNetworkStatus, name: str, strict: Optional[bool] = None) -> str:
    """
    Interface name for an adapter name

    Args:
        status: Device network status snapshot
        name: Logical or interface name typed by an operator/controller
        strict: Raise instead of passing an unknown name through;
                defaults to settings.STRICT_ADAPTER_RESOLUTION

    Raises:
        PortNotFound: In strict mode, when the name matches no port
    """
    if strict is None:
        strict = settings.STRICT_ADAPTER_RESOLUTION
    resolution = resolve_adapter_name(status, name)
    if strict and not resolution.resolved:
        raise PortNotFound(name)
    return resolution.if_name


def report_ports(status: DeviceNetworkStatus) -> List[str]:
    """Port names reported in info and metrics"""
    names = list(settings.REPORT_PORTS_EXTRA)
    names.extend(port.name for port in status.ports)
    return names
