# edge_netcore/schemas/vpn.py
"""
strongSwan VPN service schemas
Opaque service configuration, the internal form handed to the VPN
daemon collaborator, and the status/metrics it reports back
"""

from enum import Enum, IntEnum
from typing import List

from pydantic import Field

from .base import Timestamp, Uint32, Uint64, WireModel
from .network import NetworkServiceType


class VpnRole(str, Enum):
    """Deployment role of a strongSwan service"""
    AWS_CLIENT = "awsStrongSwanVpnClient"
    ON_PREM_CLIENT = "onPremStrongSwanVpnClient"
    ON_PREM_SERVER = "onPremStrongSwanVpnServer"


class VpnState(IntEnum):
    INVALID = 0
    INITIAL = 1
    CONNECTING = 2
    ESTABLISHED = 3
    INSTALLED = 4
    REKEYED = 5
    DELETED = 10


# === Configuration ===

class VpnTunnelConfig(WireModel):
    name: str = ""
    key: str = ""
    mtu: str = ""
    metric: str = ""
    local_ip_addr: str = ""
    remote_ip_addr: str = ""


class VpnClientConfig(WireModel):
    ip_addr: str = ""
    subnet_block: str = ""
    pre_shared_key: str = Field(default="", repr=False)
    tunnel_config: VpnTunnelConfig = Field(default_factory=VpnTunnelConfig)


class StrongSwanServiceConfig(WireModel):
    """Opaque config of a strongSwan network service, as sent by the controller"""
    vpn_role: VpnRole
    policy_based: bool = False
    is_client: bool = False
    vpn_gateway_ip_addr: str = ""
    vpn_subnet_block: str = ""
    vpn_local_ip_addr: str = ""
    vpn_remote_ip_addr: str = ""
    pre_shared_key: str = Field(default="", repr=False)
    local_subnet_block: str = ""
    client_config_list: List[VpnClientConfig] = Field(default_factory=list)


class NetLinkConfig(WireModel):
    name: str = ""
    ip_addr: str = ""
    subnet_block: str = ""


class VpnServiceConfig(WireModel):
    """Resolved form of a strongSwan service handed to the VPN collaborator"""
    vpn_role: VpnRole
    policy_based: bool = False
    is_client: bool = False
    port_config: NetLinkConfig = Field(default_factory=NetLinkConfig)
    app_link_config: NetLinkConfig = Field(default_factory=NetLinkConfig)
    gateway_config: NetLinkConfig = Field(default_factory=NetLinkConfig)
    client_config_list: List[VpnClientConfig] = Field(default_factory=list)

    @classmethod
    def from_service_config(
        cls,
        config: StrongSwanServiceConfig,
        port: NetLinkConfig,
        app_link: NetLinkConfig,
    ) -> "VpnServiceConfig":
        """
        Combine the opaque service config with the resolved uplink and app network

        Args:
            config: Decoded opaque config of the service
            port: Uplink the tunnel runs over
            app_link: Application network behind the tunnel
        """
        gateway = NetLinkConfig(
            ip_addr=config.vpn_gateway_ip_addr,
            subnet_block=config.vpn_subnet_block,
        )
        return cls(
            vpn_role=config.vpn_role,
            policy_based=config.policy_based,
            is_client=config.is_client,
            port_config=port,
            app_link_config=app_link,
            gateway_config=gateway,
            client_config_list=config.client_config_list,
        )


# === Status ===

class PktStats(WireModel):
    pkts: Uint64 = 0
    bytes: Uint64 = 0


class LinkPktStats(WireModel):
    in_pkts: PktStats = Field(default_factory=PktStats)
    out_pkts: PktStats = Field(default_factory=PktStats)


class VpnLinkInfo(WireModel):
    sub_net: str = ""  # Connecting subnet
    spi_id: str = ""   # Security parameter index
    direction: bool = False  # False in, True out
    pkt_stats: PktStats = Field(default_factory=PktStats)


class VpnLinkStatus(WireModel):
    id: str = ""
    name: str = ""
    req_id: str = ""
    inst_time: Uint64 = 0   # Installation time
    exp_time: Uint64 = 0    # Expiry time
    rekey_time: Uint64 = 0
    esp_info: str = ""
    state: VpnState = VpnState.INVALID
    l_info: VpnLinkInfo = Field(default_factory=VpnLinkInfo, alias="LInfo")
    r_info: VpnLinkInfo = Field(default_factory=VpnLinkInfo, alias="RInfo")
    mark_delete: bool = False


class VpnEndPoint(WireModel):
    id: str = ""       # IPsec id
    ip_addr: str = ""
    port: Uint32 = 0   # UDP port


class VpnConnStatus(WireModel):
    id: str = ""
    name: str = ""
    state: VpnState = VpnState.INVALID
    version: str = ""  # IKE version
    ikes: str = ""     # IKE parameters
    est_time: Uint64 = 0
    reauth_time: Uint64 = 0
    l_info: VpnEndPoint = Field(default_factory=VpnEndPoint, alias="LInfo")
    r_info: VpnEndPoint = Field(default_factory=VpnEndPoint, alias="RInfo")
    links: List[VpnLinkStatus] = Field(default_factory=list)
    start_line: Uint32 = 0
    end_line: Uint32 = 0
    mark_delete: bool = False


class ServiceVpnStatus(WireModel):
    version: str = ""  # strongSwan package version
    up_time: Timestamp = None
    ip_addrs: str = ""  # Listening addresses, may be several
    active_vpn_conns: List[VpnConnStatus] = Field(default_factory=list)
    stale_vpn_conns: List[VpnConnStatus] = Field(default_factory=list)
    active_tun_count: Uint32 = 0
    connecting_tun_count: Uint32 = 0
    policy_based: bool = False

    def established_conns(self) -> List[VpnConnStatus]:
        return [c for c in self.active_vpn_conns if c.state == VpnState.ESTABLISHED]


# === Metrics ===

class VpnLinkMetrics(WireModel):
    sub_net: str = ""
    spi_id: str = ""


class VpnEndPointMetrics(WireModel):
    ip_addr: str = ""
    link_info: VpnLinkMetrics = Field(default_factory=VpnLinkMetrics)
    pkt_stats: PktStats = Field(default_factory=PktStats)


class VpnConnMetrics(WireModel):
    id: str = ""
    name: str = ""
    est_time: Uint64 = 0
    type: NetworkServiceType = NetworkServiceType.STRONGSWAN
    l_end_point: VpnEndPointMetrics = Field(default_factory=VpnEndPointMetrics, alias="LEndPoint")
    r_end_point: VpnEndPointMetrics = Field(default_factory=VpnEndPointMetrics, alias="REndPoint")


class VpnMetrics(WireModel):
    up_time: Timestamp = None
    data_stat: LinkPktStats = Field(default_factory=LinkPktStats)
    ike_stat: LinkPktStats = Field(default_factory=LinkPktStats)
    nat_t_stat: LinkPktStats = Field(default_factory=LinkPktStats, alias="NatTStat")
    esp_stat: LinkPktStats = Field(default_factory=LinkPktStats)
    err_stat: LinkPktStats = Field(default_factory=LinkPktStats)
    phy_err_stat: LinkPktStats = Field(default_factory=LinkPktStats)
    vpn_conns: List[VpnConnMetrics] = Field(default_factory=list)
