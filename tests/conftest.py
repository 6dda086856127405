"""
Shared fixtures and helpers for the edge_netcore tests.

Statuses are built from plain values so each test reads like the snapshot
a connectivity manager would hand to the selector.
"""

from typing import List, Optional

import pytest

from edge_netcore.schemas import (
    AddrInfo,
    DeviceNetworkStatus,
    DevicePortConfigVersion,
    NetworkPortStatus,
)


def make_port(
    if_name: str,
    addrs: Optional[List[str]] = None,
    name: str = "",
    is_mgmt: bool = True,
    free: bool = False,
) -> NetworkPortStatus:
    """Helper to create a port record with the given addresses."""
    return NetworkPortStatus(
        if_name=if_name,
        name=name,
        is_mgmt=is_mgmt,
        free=free,
        addr_info_list=[AddrInfo(addr=a) for a in (addrs or [])],
    )


def make_status(*ports: NetworkPortStatus, version: int = DevicePortConfigVersion.DPC_IS_MGMT) -> DeviceNetworkStatus:
    return DeviceNetworkStatus(version=version, ports=list(ports))


@pytest.fixture
def two_uplinks() -> DeviceNetworkStatus:
    """
    eth0 is a free wired uplink, eth1 a metered one.

    Both are management ports at the DPC_IS_MGMT schema version.
    """
    return make_status(
        make_port("eth0", ["10.0.0.5"], name="uplink0", free=True),
        make_port("eth1", ["10.0.1.5"], name="uplink1", free=False),
    )


@pytest.fixture
def mixed_status() -> DeviceNetworkStatus:
    """
    Four ports with a mix of flags and addresses.

    eth0  free mgmt      10.0.0.5, fe80::1
    wwan0 metered mgmt   100.64.0.7
    eth2  app-only port  192.168.10.1
    eth3  free mgmt      169.254.3.3 (link-local only)
    """
    return make_status(
        make_port("eth0", ["10.0.0.5", "fe80::1"], name="wired", free=True),
        make_port("wwan0", ["100.64.0.7"], name="cell", free=False),
        make_port("eth2", ["192.168.10.1"], name="apps", is_mgmt=False, free=True),
        make_port("eth3", ["169.254.3.3"], name="backup", free=True),
    )
