# edge_netcore/schemas/service.py
"""
Network service schemas
A service (VPN, LISP, bridge, NAT, load balance) optionally bound to an
application network (app_link) and to a device adapter
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field, IPvAnyNetwork, field_validator

from .base import NIL_UUID, Timestamp, WireModel
from .lisp import LispInfoStatus, LispMetrics, ServiceLispConfig
from .network import NetworkServiceType
from .vpn import ServiceVpnStatus, StrongSwanServiceConfig, VpnMetrics


class NetworkServiceConfig(WireModel):
    """Service definition extracted from the controller config"""
    uuid: UUID = Field(default=NIL_UUID, alias="UUID")
    internal: bool = False  # Created on the device, not by the controller
    display_name: str = ""
    type: NetworkServiceType
    activate: bool = False
    app_link: UUID = NIL_UUID
    adapter: str = ""  # Interface name, a group like "uplink", or empty
    opaque_config: str = ""
    lisp_config: ServiceLispConfig = Field(default_factory=ServiceLispConfig)

    @field_validator("type")
    @classmethod
    def check_type(cls, v: NetworkServiceType) -> NetworkServiceType:
        if v == NetworkServiceType.FIRST:
            raise ValueError("Network service type must be set")
        return v

    def key(self) -> str:
        return str(self.uuid)

    def strongswan_config(self) -> StrongSwanServiceConfig:
        """
        Decode the opaque JSON config of a strongSwan service

        Raises:
            ValueError: If the service is not strongSwan
            pydantic.ValidationError: If the opaque config is malformed
        """
        if self.type != NetworkServiceType.STRONGSWAN:
            raise ValueError(f"Service {self.display_name!r} is not a strongSwan service")
        return StrongSwanServiceConfig.model_validate_json(self.opaque_config)


class NetworkServiceStatus(WireModel):
    """Provisioning state of a network service"""
    uuid: UUID = Field(default=NIL_UUID, alias="UUID")
    pending_add: bool = False
    pending_modify: bool = False
    pending_delete: bool = False
    display_name: str = ""
    type: NetworkServiceType
    activated: bool = False
    app_link: UUID = NIL_UUID
    adapter: str = ""
    opaque_status: str = ""
    lisp_status: ServiceLispConfig = Field(default_factory=ServiceLispConfig)
    if_name_list: List[str] = Field(default_factory=list)  # Recorded at activation
    subnet: Optional[IPvAnyNetwork] = None                  # Recorded at activation

    missing_network: bool = False  # app_link UUID not found
    error: str = ""
    error_time: Timestamp = None
    vpn_status: Optional[ServiceVpnStatus] = None
    lisp_info_status: Optional[LispInfoStatus] = None
    lisp_metrics: Optional[LispMetrics] = None

    def key(self) -> str:
        return str(self.uuid)

    def pending(self) -> bool:
        return self.pending_add or self.pending_modify or self.pending_delete


class NetworkServiceMetrics(WireModel):
    uuid: UUID = Field(default=NIL_UUID, alias="UUID")
    display_name: str = ""
    type: NetworkServiceType
    vpn_metrics: Optional[VpnMetrics] = None
    lisp_metrics: Optional[LispMetrics] = None

    def key(self) -> str:
        return str(self.uuid)
