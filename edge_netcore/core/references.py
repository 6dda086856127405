# edge_netcore/core/references.py
"""
Cross-object checks of the virtual network model
Field-level rules live in the schemas; these need the set of known networks
"""

import logging
from typing import Iterable, List, Mapping, Union
from uuid import UUID

from ..schemas.app_network import AppNetworkConfig
from ..schemas.base import NIL_UUID
from ..schemas.network import NetworkObjectConfig
from ..schemas.service import NetworkServiceConfig
from .errors import NetworkModelError

logger = logging.getLogger(__name__)

Networks = Union[Mapping[UUID, NetworkObjectConfig], Iterable[NetworkObjectConfig]]


def _known_uuids(networks: Networks) -> set:
    if isinstance(networks, Mapping):
        return set(networks.keys())
    return {n.uuid for n in networks}


def missing_networks(app_config: AppNetworkConfig, networks: Networks) -> List[UUID]:
    """
    Network UUIDs referenced by the application but not known
    An unset (nil) reference is not a missing network
    """
    known = _known_uuids(networks)
    missing = []
    for ref in app_config.network_uuids():
        if ref != NIL_UUID and ref not in known and ref not in missing:
            missing.append(ref)
    return missing


def validate_network_references(app_config: AppNetworkConfig, networks: Networks) -> None:
    """
    Reject an application whose attachments point at unknown networks

    Raises:
        NetworkModelError: Listing every unknown network UUID
    """
    missing = missing_networks(app_config, networks)
    if missing:
        logger.warning(f"App {app_config.display_name or app_config.key()} references unknown networks {missing}")
        raise NetworkModelError(
            f"Unknown network(s) referenced by app {app_config.key()}",
            {"app": app_config.key(), "missing": [str(m) for m in missing]},
        )


def validate_service_reference(service: NetworkServiceConfig, networks: Networks) -> None:
    """
    Reject a service bound to an unknown application network

    Raises:
        NetworkModelError: If app_link is set and not a known network
    """
    if service.app_link == NIL_UUID:
        return
    if service.app_link not in _known_uuids(networks):
        logger.warning(f"Service {service.display_name or service.key()} links unknown network {service.app_link}")
        raise NetworkModelError(
            f"Unknown network {service.app_link} linked by service {service.key()}",
            {"service": service.key(), "missing": [str(service.app_link)]},
        )
