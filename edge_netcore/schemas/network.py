# edge_netcore/schemas/network.py
"""
Network object schemas
Addressing policy shared by device ports and application networks
"""

from enum import IntEnum
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import Field, IPvAnyAddress, IPvAnyInterface, IPvAnyNetwork, field_validator, model_validator

from .base import NIL_UUID, Timestamp, Uint32, WireModel, normalize_mac


class NetworkType(IntEnum):
    """Address family of an application network"""
    IPV4 = 4
    IPV6 = 6
    CRYPTO_EID = 14  # IPv6 or IPv4 EIDs, decided by the adapter address


class DhcpType(IntEnum):
    """How addresses are handed out on a network"""
    NOOP = 0
    STATIC = 1       # Device static config
    PASSTHROUGH = 2  # App passthrough e.g., to a bridge
    SERVER = 3       # Local server for app network
    CLIENT = 4       # Device client on external port


class NetworkServiceType(IntEnum):
    """Service attached to an application network"""
    FIRST = 0
    STRONGSWAN = 1
    LISP = 2
    BRIDGE = 3
    NAT = 4
    LB = 5  # Load balance


class NetworkProxyType(IntEnum):
    """Proxy protocol, values match the controller API"""
    HTTP = 0
    HTTPS = 1
    SOCKS = 2
    FTP = 3
    NOPROXY = 4


class ProxyEntry(WireModel):
    type: NetworkProxyType = NetworkProxyType.HTTP
    server: str
    port: Uint32 = 0


class ProxyConfig(WireModel):
    """
    Proxy settings for a port or network
    With network_proxy_enable set WPAD is used; if network_proxy_url is empty
    the DNS suffixes are tried until a wpad.dat can be fetched
    """
    proxies: List[ProxyEntry] = Field(default_factory=list)
    exceptions: str = ""
    pacfile: str = ""
    network_proxy_enable: bool = False
    network_proxy_url: str = Field(default="", alias="NetworkProxyURL")
    wpad_url: str = Field(default="", alias="WpadURL")


class DhcpConfig(WireModel):
    """Addressing of a device port as configured by the controller"""
    dhcp: DhcpType = DhcpType.NOOP
    addr_subnet: Optional[IPvAnyInterface] = None  # In CIDR e.g., 192.168.1.44/24
    gateway: Optional[IPvAnyAddress] = None
    domain_name: str = ""
    ntp_server: Optional[IPvAnyAddress] = None
    dns_servers: List[IPvAnyAddress] = Field(default_factory=list)  # Gateway is DNS if empty

    @model_validator(mode="after")
    def check_static(self) -> "DhcpConfig":
        if self.dhcp == DhcpType.STATIC and self.addr_subnet is None:
            raise ValueError("Static addressing requires addr_subnet in CIDR form")
        return self


class IpRange(WireModel):
    """Inclusive address range, e.g. a DHCP pool"""
    start: IPvAnyAddress
    end: IPvAnyAddress

    @model_validator(mode="after")
    def check_order(self) -> "IpRange":
        if self.start.version != self.end.version:
            raise ValueError("IP range start and end must be the same address family")
        if self.start > self.end:
            raise ValueError(f"IP range start {self.start} is after end {self.end}")
        return self

    def __contains__(self, addr) -> bool:
        return addr.version == self.start.version and self.start <= addr <= self.end


class DnsNameToIP(WireModel):
    """Static name entry used for DNS and for the ACL eidset"""
    host_name: str
    ips: List[IPvAnyAddress] = Field(default_factory=list, alias="IPs")


class NetworkObjectConfig(WireModel):
    """
    A named subnet referenced by UUID from application network interfaces
    A network not referenced from any network service stays local to the host
    """
    uuid: UUID = Field(default=NIL_UUID, alias="UUID")
    type: NetworkType = NetworkType.IPV4
    dhcp: DhcpType = DhcpType.NOOP  # For STATIC or SERVER the fields below apply
    subnet: Optional[IPvAnyNetwork] = None
    gateway: Optional[IPvAnyAddress] = None
    domain_name: str = ""
    ntp_server: Optional[IPvAnyAddress] = None
    dns_servers: List[IPvAnyAddress] = Field(default_factory=list)
    dhcp_range: Optional[IpRange] = None
    dns_name_to_ip_list: List[DnsNameToIP] = Field(default_factory=list, alias="DnsNameToIPList")
    proxy: Optional[ProxyConfig] = None

    @model_validator(mode="after")
    def check_addressing(self) -> "NetworkObjectConfig":
        """Gateway and DHCP pool must sit inside the subnet"""
        if self.dhcp == DhcpType.SERVER and self.subnet is None:
            raise ValueError("A network served by DHCP requires a subnet")
        if self.subnet is None:
            return self
        if self.type == NetworkType.IPV4 and self.subnet.version != 4:
            raise ValueError(f"Subnet {self.subnet} is not IPv4")
        if self.type == NetworkType.IPV6 and self.subnet.version != 6:
            raise ValueError(f"Subnet {self.subnet} is not IPv6")
        if self.gateway is not None and self.gateway not in self.subnet:
            raise ValueError(f"Gateway {self.gateway} is outside subnet {self.subnet}")
        if self.dhcp_range is not None:
            for addr in (self.dhcp_range.start, self.dhcp_range.end):
                if addr not in self.subnet:
                    raise ValueError(f"DHCP range address {addr} is outside subnet {self.subnet}")
        return self

    def key(self) -> str:
        return str(self.uuid)


class NetworkObjectStatus(NetworkObjectConfig):
    """Provisioning state of a network object"""
    pending_add: bool = False
    pending_modify: bool = False
    pending_delete: bool = False
    bridge_num: int = 0
    bridge_name: str = ""  # bn<N>
    bridge_ip_addr: str = Field(default="", alias="BridgeIPAddr")

    # MAC address to assigned IP address
    ip_assignments: Dict[str, IPvAnyAddress] = Field(default_factory=dict, alias="IPAssignments")

    # Union of all ipsets fed to dnsmasq for the bridge
    bridge_ipsets: List[str] = Field(default_factory=list, alias="BridgeIPSets")
    vif_names: List[str] = Field(default_factory=list)
    ipv4_eid: bool = False  # CryptoEid network using IPv4 EIDs

    error: str = ""
    error_time: Timestamp = None

    @field_validator("ip_assignments", mode="before")
    @classmethod
    def normalize_macs(cls, v):
        """Keys are MAC addresses, stored lower-case colon separated"""
        if not isinstance(v, dict):
            return v
        normalized = {}
        for mac, ip in v.items():
            key = normalize_mac(mac)
            if key is None:
                raise ValueError("Empty MAC address in IP assignments")
            normalized[key] = ip
        return normalized

    def pending(self) -> bool:
        return self.pending_add or self.pending_modify or self.pending_delete
