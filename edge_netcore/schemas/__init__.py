# edge_netcore/schemas/__init__.py
"""
Pydantic schemas for device ports, application networks and services
Organized by domain: ports, networks, ACLs, services, metrics
"""

from .base import NIL_UUID, UUIDandVersion, WireModel
from .network import (
    DhcpConfig,
    DhcpType,
    DnsNameToIP,
    IpRange,
    NetworkObjectConfig,
    NetworkObjectStatus,
    NetworkProxyType,
    NetworkServiceType,
    NetworkType,
    ProxyConfig,
    ProxyEntry,
)
from .port import (
    AddrInfo,
    DeviceNetworkConfig,
    DeviceNetworkStatus,
    DevicePortConfig,
    DevicePortConfigList,
    DevicePortConfigVersion,
    IPInfo,
    NetworkPortConfig,
    NetworkPortStatus,
)
from .acl import ACE, ACEAction, ACEMatch, ACEMatchType, RateLimit
from .lisp import (
    EidMap,
    EidStatistics,
    LispDatabaseMap,
    LispDataplaneConfig,
    LispDecapKey,
    LispInfoStatus,
    LispMapCacheEntry,
    LispMetrics,
    LispPktStat,
    LispRlocState,
    LispRlocStatistics,
    MapServer,
    MapServerType,
    ServiceLispConfig,
)
from .vpn import (
    LinkPktStats,
    NetLinkConfig,
    PktStats,
    ServiceVpnStatus,
    StrongSwanServiceConfig,
    VpnClientConfig,
    VpnConnMetrics,
    VpnConnStatus,
    VpnEndPoint,
    VpnEndPointMetrics,
    VpnLinkInfo,
    VpnLinkMetrics,
    VpnLinkStatus,
    VpnMetrics,
    VpnRole,
    VpnServiceConfig,
    VpnState,
    VpnTunnelConfig,
)
from .service import NetworkServiceConfig, NetworkServiceMetrics, NetworkServiceStatus
from .app_network import (
    AdditionalInfoApp,
    AdditionalInfoDevice,
    AppNetworkConfig,
    AppNetworkStatus,
    OverlayNetworkConfig,
    OverlayNetworkStatus,
    UnderlayNetworkConfig,
    UnderlayNetworkStatus,
    VifInfo,
)
from .metrics import NetworkMetric, NetworkMetrics, cast_network_metrics

__all__ = [
    # Base
    "NIL_UUID",
    "UUIDandVersion",
    "WireModel",
    # Network objects
    "DhcpConfig",
    "DhcpType",
    "DnsNameToIP",
    "IpRange",
    "NetworkObjectConfig",
    "NetworkObjectStatus",
    "NetworkProxyType",
    "NetworkServiceType",
    "NetworkType",
    "ProxyConfig",
    "ProxyEntry",
    # Ports
    "AddrInfo",
    "DeviceNetworkConfig",
    "DeviceNetworkStatus",
    "DevicePortConfig",
    "DevicePortConfigList",
    "DevicePortConfigVersion",
    "IPInfo",
    "NetworkPortConfig",
    "NetworkPortStatus",
    # ACL
    "ACE",
    "ACEAction",
    "ACEMatch",
    "ACEMatchType",
    "RateLimit",
    # LISP
    "EidMap",
    "EidStatistics",
    "LispDatabaseMap",
    "LispDataplaneConfig",
    "LispDecapKey",
    "LispInfoStatus",
    "LispMapCacheEntry",
    "LispMetrics",
    "LispPktStat",
    "LispRlocState",
    "LispRlocStatistics",
    "MapServer",
    "MapServerType",
    "ServiceLispConfig",
    # VPN
    "LinkPktStats",
    "NetLinkConfig",
    "PktStats",
    "ServiceVpnStatus",
    "StrongSwanServiceConfig",
    "VpnClientConfig",
    "VpnConnMetrics",
    "VpnConnStatus",
    "VpnEndPoint",
    "VpnEndPointMetrics",
    "VpnLinkInfo",
    "VpnLinkMetrics",
    "VpnLinkStatus",
    "VpnMetrics",
    "VpnRole",
    "VpnServiceConfig",
    "VpnState",
    "VpnTunnelConfig",
    # Services
    "NetworkServiceConfig",
    "NetworkServiceMetrics",
    "NetworkServiceStatus",
    # Application networks
    "AdditionalInfoApp",
    "AdditionalInfoDevice",
    "AppNetworkConfig",
    "AppNetworkStatus",
    "OverlayNetworkConfig",
    "OverlayNetworkStatus",
    "UnderlayNetworkConfig",
    "UnderlayNetworkStatus",
    "VifInfo",
    # Metrics
    "NetworkMetric",
    "NetworkMetrics",
    "cast_network_metrics",
]
