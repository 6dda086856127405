# edge_netcore/schemas/lisp.py
"""
LISP service schemas
Map server configuration plus the status and metrics reported by the
LISP dataplane
"""

from enum import IntEnum
from typing import List, Optional

from pydantic import Field, IPvAnyAddress, model_validator

from .base import Uint32, Uint64, WireModel


class MapServerType(IntEnum):
    INVALID = 0
    MAPSERVER = 1
    SUPPORT_SERVER = 2


class MapServer(WireModel):
    service_type: MapServerType = MapServerType.MAPSERVER
    name_or_ip: str = Field(..., min_length=1)
    credential: str = ""


class ServiceLispConfig(WireModel):
    """LISP parameters of a network service"""
    map_servers: List[MapServer] = Field(default_factory=list)
    iid: Uint32 = Field(default=0, alias="IID")
    allocate: bool = False
    export_private: bool = False
    eid_prefix: Optional[IPvAnyAddress] = None
    eid_prefix_len: Uint32 = 0
    experimental: bool = False

    @model_validator(mode="after")
    def check_prefix_len(self) -> "ServiceLispConfig":
        if self.eid_prefix is not None:
            max_len = 32 if self.eid_prefix.version == 4 else 128
            if self.eid_prefix_len > max_len:
                raise ValueError(f"EID prefix length {self.eid_prefix_len} exceeds {max_len}")
        return self


# === Status ===

class LispRlocState(WireModel):
    rloc: IPvAnyAddress
    reachable: bool = False


class LispMapCacheEntry(WireModel):
    eid: IPvAnyAddress = Field(..., alias="EID")
    rlocs: List[LispRlocState] = Field(default_factory=list)


class LispDatabaseMap(WireModel):
    iid: Uint64 = Field(default=0, alias="IID")
    map_cache_entries: List[LispMapCacheEntry] = Field(default_factory=list)


class LispDecapKey(WireModel):
    rloc: IPvAnyAddress
    port: Uint64 = 0
    key_count: Uint64 = 0


class LispInfoStatus(WireModel):
    itr_crypto_port: Uint64 = 0
    etr_nat_port: Uint64 = 0
    interfaces: List[str] = Field(default_factory=list)
    database_maps: List[LispDatabaseMap] = Field(default_factory=list)
    decap_keys: List[LispDecapKey] = Field(default_factory=list)


# === Metrics ===

class LispPktStat(WireModel):
    pkts: Uint64 = 0
    bytes: Uint64 = 0


class LispRlocStatistics(WireModel):
    rloc: IPvAnyAddress
    stats: LispPktStat = Field(default_factory=LispPktStat)
    seconds_since_last_packet: Uint64 = 0


class EidStatistics(WireModel):
    iid: Uint64 = Field(default=0, alias="IID")
    eid: IPvAnyAddress
    rloc_stats: List[LispRlocStatistics] = Field(default_factory=list)


class EidMap(WireModel):
    iid: Uint64 = Field(default=0, alias="IID")
    eids: List[IPvAnyAddress] = Field(default_factory=list)


class LispMetrics(WireModel):
    """Encap and decap counters of the LISP dataplane"""
    # Encap statistics
    eid_maps: List[EidMap] = Field(default_factory=list)
    eid_stats: List[EidStatistics] = Field(default_factory=list)
    itr_packet_send_error: LispPktStat = Field(default_factory=LispPktStat)
    invalid_eid_error: LispPktStat = Field(default_factory=LispPktStat)

    # Decap statistics
    no_decrypt_key: LispPktStat = Field(default_factory=LispPktStat)
    outer_header_error: LispPktStat = Field(default_factory=LispPktStat)
    bad_inner_version: LispPktStat = Field(default_factory=LispPktStat)
    good_packets: LispPktStat = Field(default_factory=LispPktStat)
    icv_error: LispPktStat = Field(default_factory=LispPktStat, alias="ICVError")
    lisp_header_error: LispPktStat = Field(default_factory=LispPktStat)
    check_sum_error: LispPktStat = Field(default_factory=LispPktStat)
    decap_re_inject_error: LispPktStat = Field(default_factory=LispPktStat)
    decrypt_error: LispPktStat = Field(default_factory=LispPktStat)


class LispDataplaneConfig(WireModel):
    legacy: bool = False  # Run the legacy lispers.net dataplane
