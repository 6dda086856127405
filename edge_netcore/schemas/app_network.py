# edge_netcore/schemas/app_network.py
"""
Application network schemas
Per-application overlay and underlay attachments, each carrying its ACL
"""

import logging
from typing import List, Optional
from uuid import UUID

from pydantic import Field, IPvAnyAddress, field_validator

from .acl import ACE
from .base import NIL_UUID, MacAddress, Timestamp, Uint32, UUIDandVersion, WireModel
from .lisp import MapServer
from .network import DnsNameToIP

logger = logging.getLogger(__name__)


class VifInfo(WireModel):
    """Virtual interface created for an application network attachment"""
    bridge: str = ""
    vif: str = ""
    vif_user_name: str = ""
    mac: MacAddress = None


class AdditionalInfoDevice(WireModel):
    """Geolocation of the device underlay, from the lookup collaborator"""
    underlay_ip: str = Field(default="", alias="UnderlayIP")
    hostname: str = ""  # From reverse DNS
    city: str = ""
    region: str = ""
    country: str = ""
    loc: str = ""  # "lat,long"
    org: str = ""  # From AS number


class AdditionalInfoApp(WireModel):
    """Ties an application EID back to the device"""
    display_name: str = ""
    device_eid: Optional[IPvAnyAddress] = Field(default=None, alias="DeviceEID")
    device_iid: Uint32 = Field(default=0, alias="DeviceIID")
    underlay_ip: str = Field(default="", alias="UnderlayIP")
    hostname: str = ""


# === Overlay ===

class OverlayNetworkConfig(WireModel):
    """Overlay attachment; the application is addressed by its EID"""
    name: str = ""
    eid: Optional[IPvAnyAddress] = Field(default=None, alias="EID")  # Always EIDv6
    lisp_signature: str = ""
    acls: List[ACE] = Field(default_factory=list, alias="ACLs")
    app_mac_addr: MacAddress = None
    app_ip_addr: Optional[IPvAnyAddress] = Field(default=None, alias="AppIPAddr")  # EIDv4 or EIDv6
    network: UUID = NIL_UUID

    additional_info_device: Optional[AdditionalInfoDevice] = None

    # Only used for the management overlay
    mgmt_iid: Uint32 = Field(default=0, alias="MgmtIID")
    mgmt_dns_name_to_ip_list: List[DnsNameToIP] = Field(default_factory=list, alias="MgmtDnsNameToIPList")
    mgmt_map_servers: List[MapServer] = Field(default_factory=list)

    @field_validator("eid")
    @classmethod
    def check_eid(cls, v):
        if v is not None and v.version != 6:
            raise ValueError(f"Overlay EID {v} must be an IPv6 address")
        return v


class OverlayNetworkStatus(OverlayNetworkConfig):
    vif_info: VifInfo = Field(default_factory=VifInfo)
    bridge_mac: MacAddress = None
    bridge_ip_addr: str = Field(default="", alias="BridgeIPAddr")  # DNS/DHCP service address
    host_name: str = ""


# === Underlay ===

class UnderlayNetworkConfig(WireModel):
    """Underlay attachment with direct local addressing"""
    name: str = ""
    app_mac_addr: MacAddress = None
    app_ip_addr: Optional[IPvAnyAddress] = Field(default=None, alias="AppIPAddr")  # DHCP assigns it if set
    network: UUID = NIL_UUID
    acls: List[ACE] = Field(default_factory=list, alias="ACLs")


class UnderlayNetworkStatus(UnderlayNetworkConfig):
    vif_info: VifInfo = Field(default_factory=VifInfo)
    bridge_mac: MacAddress = None
    bridge_ip_addr: str = Field(default="", alias="BridgeIPAddr")
    assigned_ip_addr: str = Field(default="", alias="AssignedIPAddr")  # Given to the application
    host_name: str = ""


# === Application ===

def _verify_filename(key: str, file_name: str) -> bool:
    expect = key + ".json"
    if expect != file_name:
        logger.error(f"Mismatch between filename and contained uuid: {file_name} vs. {expect}")
        return False
    return True


class AppNetworkConfig(WireModel):
    """All network attachments of one application instance"""
    uuid_and_version: UUIDandVersion = Field(default_factory=UUIDandVersion, alias="UUIDandVersion")
    display_name: str = ""
    activate: bool = False
    is_zedmanager: bool = False  # Configure the EID locally instead of a bridge
    legacy_data_plane: bool = False
    overlay_network_list: List[OverlayNetworkConfig] = Field(default_factory=list)
    underlay_network_list: List[UnderlayNetworkConfig] = Field(default_factory=list)

    def key(self) -> str:
        return str(self.uuid_and_version.uuid)

    def verify_filename(self, file_name: str) -> bool:
        return _verify_filename(self.key(), file_name)

    def network_uuids(self) -> List[UUID]:
        """Network UUIDs referenced by the attachments, overlays first"""
        refs = [o.network for o in self.overlay_network_list]
        refs.extend(u.network for u in self.underlay_network_list)
        return refs


class AppNetworkStatus(WireModel):
    uuid_and_version: UUIDandVersion = Field(default_factory=UUIDandVersion, alias="UUIDandVersion")
    app_num: int = 0
    activated: bool = False
    pending_add: bool = False
    pending_modify: bool = False
    pending_delete: bool = False
    display_name: str = ""

    # Copied from the config so the status can be torn down once the config is gone
    is_zedmanager: bool = False
    legacy_data_plane: bool = False
    overlay_network_list: List[OverlayNetworkStatus] = Field(default_factory=list)
    underlay_network_list: List[UnderlayNetworkStatus] = Field(default_factory=list)
    missing_network: bool = False  # Some referenced network is unknown

    error: str = ""
    error_time: Timestamp = None

    def key(self) -> str:
        return str(self.uuid_and_version.uuid)

    def verify_filename(self, file_name: str) -> bool:
        return _verify_filename(self.key(), file_name)

    def pending(self) -> bool:
        return self.pending_add or self.pending_modify or self.pending_delete
