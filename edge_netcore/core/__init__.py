# edge_netcore/core/__init__.py
"""
Core selection logic
Classifier and selector functions are pure over a DeviceNetworkStatus snapshot
"""

from .errors import NetCoreError, NetworkModelError, NoAddressAvailable, NotFound, PortNotFound
from .classifier import (
    AdapterResolution,
    adapter_to_ifname,
    is_free_management_port,
    is_management_port,
    is_port,
    lookup_management_port,
    report_ports,
    resolve_adapter_name,
)
from .selector import (
    count_local_addr_any_no_link_local,
    count_local_addr_free_no_link_local,
    eligible_addresses,
    list_management_ports,
    local_addr_any,
    local_addr_any_no_link_local,
    local_addr_free_no_link_local,
    management_ports_any,
    management_ports_free,
    management_ports_free_no_link_local,
    management_ports_non_free,
    reverse_lookup_port,
    rotate,
    select_address,
)
from .priority import Health, rank, rank_key
from .references import missing_networks, validate_network_references, validate_service_reference
from .publisher import NetworkStatusPublisher

__all__ = [
    # Errors
    "NetCoreError",
    "NetworkModelError",
    "NoAddressAvailable",
    "NotFound",
    "PortNotFound",
    # Classifier
    "AdapterResolution",
    "adapter_to_ifname",
    "is_free_management_port",
    "is_management_port",
    "is_port",
    "lookup_management_port",
    "report_ports",
    "resolve_adapter_name",
    # Selector
    "count_local_addr_any_no_link_local",
    "count_local_addr_free_no_link_local",
    "eligible_addresses",
    "list_management_ports",
    "local_addr_any",
    "local_addr_any_no_link_local",
    "local_addr_free_no_link_local",
    "management_ports_any",
    "management_ports_free",
    "management_ports_free_no_link_local",
    "management_ports_non_free",
    "reverse_lookup_port",
    "rotate",
    "select_address",
    # Priority list
    "Health",
    "rank",
    "rank_key",
    # References
    "missing_networks",
    "validate_network_references",
    "validate_service_reference",
    # Publisher
    "NetworkStatusPublisher",
]
