# edge_netcore/schemas/metrics.py
"""
Network metrics for overlay and underlay interfaces
External consumers key on the serialized field names (IfName, TxBytes, ...),
so dump with by_alias=True and never rename these fields
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import Uint64, WireModel

# sysfs statistics file name -> NetworkMetric field
SYSFS_COUNTERS = {
    "tx_bytes": "tx_bytes",
    "rx_bytes": "rx_bytes",
    "tx_dropped": "tx_drops",
    "rx_dropped": "rx_drops",
    "tx_packets": "tx_pkts",
    "rx_packets": "rx_pkts",
    "tx_errors": "tx_errors",
    "rx_errors": "rx_errors",
}


class NetworkMetric(WireModel):
    """Counters for one interface; all values are unsigned 64-bit"""
    if_name: str
    tx_bytes: Uint64 = 0
    rx_bytes: Uint64 = 0
    tx_drops: Uint64 = 0
    rx_drops: Uint64 = 0
    tx_pkts: Uint64 = 0
    rx_pkts: Uint64 = 0
    tx_errors: Uint64 = 0
    rx_errors: Uint64 = 0
    tx_acl_drops: Uint64 = 0             # Implicit deny/drop at the end of the ACL
    rx_acl_drops: Uint64 = 0
    tx_acl_rate_limit_drops: Uint64 = 0  # All rate limited rules
    rx_acl_rate_limit_drops: Uint64 = 0

    @classmethod
    def from_counters(cls, if_name: str, counters: Dict[str, int], **acl_counters: int) -> "NetworkMetric":
        """
        Build a metric from kernel interface statistics

        Args:
            if_name: Interface the counters belong to
            counters: Values keyed by sysfs statistics name (rx_bytes, tx_packets, rx_dropped...);
                      unknown names are ignored
            acl_counters: ACL drop counters keyed by field name (tx_acl_drops...)
        """
        values = {
            field: counters[name]
            for name, field in SYSFS_COUNTERS.items()
            if name in counters
        }
        values.update(acl_counters)
        return cls(if_name=if_name, **values)


class NetworkMetrics(WireModel):
    """Matches the networkMetrics message of the controller API"""
    metric_list: List[NetworkMetric] = Field(default_factory=list)

    def lookup(self, if_name: str) -> Optional[NetworkMetric]:
        for metric in self.metric_list:
            if metric.if_name == if_name:
                return metric
        return None


def cast_network_metrics(obj: Any) -> NetworkMetrics:
    """
    Convert metrics received in generic form (a dict from a pubsub channel,
    a model from another module) into NetworkMetrics

    Raises:
        pydantic.ValidationError: If the input does not describe network metrics
    """
    if isinstance(obj, NetworkMetrics):
        return obj
    if isinstance(obj, WireModel):
        obj = obj.model_dump(by_alias=True)
    return NetworkMetrics.model_validate(obj)
