# edge_netcore/schemas/port.py
"""
Port schemas
Observed per-port status, the device-wide status snapshot and the
candidate port configurations used for failover
"""

import logging
from collections import Counter
from enum import IntEnum
from typing import List, Optional, Tuple

from pydantic import ConfigDict, Field, IPvAnyAddress, model_validator

from .base import Timestamp, WireModel
from .network import DhcpConfig, DhcpType, NetworkObjectConfig, ProxyConfig

logger = logging.getLogger(__name__)


class DevicePortConfigVersion(IntEnum):
    """
    Schema version of a port configuration
    A new value is added whenever fields or semantics change
    """
    DPC_INITIAL = 0
    DPC_IS_MGMT = 1  # IsMgmt must be set for management ports


# === Observed status ===

class IPInfo(WireModel):
    """Geolocation of an address, as returned by the lookup service"""
    ip: str = ""
    hostname: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    loc: str = ""  # "lat,long"
    org: str = ""  # From AS number
    postal: str = ""

    model_config = ConfigDict(alias_generator=None)


class AddrInfo(WireModel):
    """
    One address observed on a port
    geo is advisory only; selection never looks at it
    """
    addr: IPvAnyAddress
    geo: Optional[IPInfo] = None
    last_geo_timestamp: Timestamp = None


class NetworkPortStatus(WireModel):
    """Canonical record of one device port"""
    if_name: str                     # Kernel interface name
    name: str = ""                   # Logical name set by controller/model
    is_mgmt: bool = False            # Used to talk to controller
    free: bool = False               # No cost, preferred for controller traffic
    network: NetworkObjectConfig = Field(default_factory=NetworkObjectConfig)
    addr_info_list: Tuple[AddrInfo, ...] = Field(default_factory=tuple)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
    error: str = ""
    error_time: Timestamp = None

    @property
    def addrs(self) -> List[IPvAnyAddress]:
        return [a.addr for a in self.addr_info_list]


class DeviceNetworkStatus(WireModel):
    """
    Snapshot of all device ports, published to every consumer
    Before DPC_IS_MGMT every port counts as a management port
    """
    version: int = Field(default=DevicePortConfigVersion.DPC_INITIAL, ge=0)
    ports: Tuple[NetworkPortStatus, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def warn_duplicate_names(self) -> "DeviceNetworkStatus":
        """Names should be unique; lookups stay first-match-wins if not"""
        if_names = Counter(p.if_name for p in self.ports)
        names = Counter(p.name for p in self.ports if p.name)
        for dup in [n for n, c in if_names.items() if c > 1]:
            logger.warning(f"Duplicate interface name {dup} in device network status")
        for dup in [n for n, c in names.items() if c > 1]:
            logger.warning(f"Duplicate logical port name {dup} in device network status")
        return self

    @property
    def mgmt_flag_honoured(self) -> bool:
        return self.version >= DevicePortConfigVersion.DPC_IS_MGMT

    def is_mgmt_eligible(self, port: NetworkPortStatus) -> bool:
        """Version-aware management check shared by every classifier and selector"""
        return not self.mgmt_flag_honoured or port.is_mgmt


# === Configured ports ===

class NetworkPortConfig(WireModel):
    """Controller-provided configuration of one port"""
    if_name: str
    name: str = ""
    is_mgmt: bool = False
    free: bool = False
    dhcp_config: DhcpConfig = Field(default_factory=DhcpConfig)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)


class DevicePortConfig(WireModel):
    """
    A complete configuration for all device ports
    Adopted as a whole or not at all
    """
    version: int = Field(default=DevicePortConfigVersion.DPC_INITIAL, ge=0)
    key: str = ""
    time_priority: Timestamp = None  # None is the lowest priority fallback

    # Last connectivity test results; None means never tested
    last_failed: Timestamp = None
    last_succeeded: Timestamp = None

    ports: Tuple[NetworkPortConfig, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_unique_ports(self) -> "DevicePortConfig":
        seen = set()
        for port in self.ports:
            if port.if_name in seen:
                raise ValueError(f"Port {port.if_name} listed twice in port config {self.key!r}")
            seen.add(port.if_name)
        return self


class DevicePortConfigList(WireModel):
    """Candidate port configurations; first entry is the most preferred"""
    port_config_list: Tuple[DevicePortConfig, ...] = Field(default_factory=tuple)


class DeviceNetworkConfig(WireModel):
    """
    Legacy uplink description found in older build artifacts
    free_uplinks is the subset used for image downloads
    """
    uplink: List[str] = Field(default_factory=list)
    free_uplinks: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_subset(self) -> "DeviceNetworkConfig":
        extra = [u for u in self.free_uplinks if u not in self.uplink]
        if extra:
            raise ValueError(f"Free uplinks {extra} are not listed as uplinks")
        return self

    def to_port_config(self, key: str = "legacy") -> DevicePortConfig:
        """Every legacy uplink becomes a DHCP client management port"""
        ports = [
            NetworkPortConfig(
                if_name=u,
                name=u,
                is_mgmt=True,
                free=u in self.free_uplinks,
                dhcp_config=DhcpConfig(dhcp=DhcpType.CLIENT),
            )
            for u in self.uplink
        ]
        return DevicePortConfig(
            version=DevicePortConfigVersion.DPC_INITIAL,
            key=key,
            ports=ports,
        )
