# edge_netcore/__init__.py
"""
edge_netcore

Port status model, uplink selection and virtual network data model for an
edge device with several network uplinks.

schemas contains the pydantic records (ports, networks, ACLs, services, metrics)
core contains the classifier, selector, priority list ranking and errors
config holds the pydantic-settings configuration
"""

from .config import settings
from .schemas import DeviceNetworkStatus, DevicePortConfigList, DevicePortConfigVersion, NetworkPortStatus

__version__ = settings.APP_VERSION

__all__ = [
    "settings",
    "DeviceNetworkStatus",
    "DevicePortConfigList",
    "DevicePortConfigVersion",
    "NetworkPortStatus",
]
