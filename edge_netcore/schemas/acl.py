# edge_netcore/schemas/acl.py
"""
Access control list schemas
Every application network interface carries an ordered list of ACEs;
an implicit reject rule terminates each list
"""

import ipaddress
from enum import Enum
from typing import List, NamedTuple, Optional

from pydantic import Field, field_validator, model_validator

from .base import WireModel

LIMIT_UNITS = ("s", "m", "h")  # second, minute, hour

PROTOCOL_NAMES = ("tcp", "udp", "icmp", "icmpv6", "sctp", "gre", "esp", "ah")


class ACEMatchType(str, Enum):
    """
    What an ACE match compares against
    ip and host match the remote endpoint; host is suffix matching so
    example.net also matches *.example.net. eidset matches every address
    listed in the overlay network's DNS name to IP list
    """
    IP = "ip"
    HOST = "host"
    EIDSET = "eidset"
    PROTOCOL = "protocol"
    FPORT = "fport"  # Foreign (remote) port
    LPORT = "lport"  # Local port


class ACEMatch(WireModel):
    """One match predicate; matches are bidirectional"""
    type: ACEMatchType
    value: str = ""

    @model_validator(mode="after")
    def check_value(self) -> "ACEMatch":
        v = self.value.strip()
        if self.type == ACEMatchType.IP:
            try:
                ipaddress.ip_network(v, strict=False)
            except ValueError:
                raise ValueError(f"ACE ip match needs an address or prefix, got {self.value!r}")
        elif self.type == ACEMatchType.HOST:
            if not v:
                raise ValueError("ACE host match needs a host name")
        elif self.type in (ACEMatchType.FPORT, ACEMatchType.LPORT):
            if not v.isdigit() or not 1 <= int(v) <= 65535:
                raise ValueError(f"ACE {self.type.value} match needs a port 1-65535, got {self.value!r}")
        elif self.type == ACEMatchType.PROTOCOL:
            if v.isdigit():
                if int(v) > 255:
                    raise ValueError(f"ACE protocol number out of range: {self.value!r}")
            elif v.lower() not in PROTOCOL_NAMES:
                raise ValueError(f"Unknown ACE protocol {self.value!r}")
        return self


class RateLimit(NamedTuple):
    rate: int   # Packets per unit
    unit: str
    burst: int  # Packets


class ACEAction(WireModel):
    """
    Action taken when all matches of an ACE hit
    The limit_* fields only apply when limit is set and target_port only
    when port_map is set; use rate_limit() and mapped_port() to read them
    """
    drop: bool = False  # Otherwise accept

    limit: bool = False
    limit_rate: int = 0
    limit_unit: str = ""
    limit_burst: int = 0

    port_map: bool = False
    target_port: int = 0  # Internal port

    @model_validator(mode="after")
    def check_action(self) -> "ACEAction":
        if self.limit:
            if self.limit_unit not in LIMIT_UNITS:
                raise ValueError(f"Rate limit unit must be one of {', '.join(LIMIT_UNITS)}")
            if self.limit_rate <= 0:
                raise ValueError("Rate limit needs a positive rate")
            if self.limit_burst < 0:
                raise ValueError("Rate limit burst cannot be negative")
        if self.port_map and not 1 <= self.target_port <= 65535:
            raise ValueError(f"Port map target {self.target_port} is not a valid port")
        return self

    @property
    def accept(self) -> bool:
        return not self.drop

    def rate_limit(self) -> Optional[RateLimit]:
        if not self.limit:
            return None
        return RateLimit(self.limit_rate, self.limit_unit, self.limit_burst)

    def mapped_port(self) -> Optional[int]:
        if not self.port_map:
            return None
        return self.target_port


class ACE(WireModel):
    """
    Access control entry: all matches must hit for the actions to apply
    No matches means the entry matches all traffic
    """
    matches: List[ACEMatch] = Field(default_factory=list)
    actions: List[ACEAction]

    @field_validator("actions")
    @classmethod
    def require_action(cls, v: List[ACEAction]) -> List[ACEAction]:
        """An entry without actions would only repeat the implicit reject"""
        if not v:
            raise ValueError("ACE must have at least one action")
        return v

    @property
    def matches_all(self) -> bool:
        return not self.matches

    def match_values(self, match_type: ACEMatchType) -> List[str]:
        return [m.value for m in self.matches if m.type == match_type]
