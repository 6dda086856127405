# edge_netcore/schemas/base.py
"""
Shared base model and field types for all records
"""

import re
from datetime import datetime
from typing import Annotated, Any, Optional
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_pascal

NIL_UUID = UUID(int=0)

Uint32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
Uint64 = Annotated[int, Field(ge=0, le=2**64 - 1)]
PortNumber = Annotated[int, Field(ge=1, le=65535)]


def _zero_time_to_none(value: Any) -> Any:
    """Go encodes an unset time as year 1; treat that as 'never'"""
    if isinstance(value, str) and value.startswith("0001-01-01"):
        return None
    if isinstance(value, datetime) and value.year == 1:
        return None
    return value


# None means "never" (never probed, never failed, no priority)
Timestamp = Annotated[Optional[datetime], BeforeValidator(_zero_time_to_none)]


def normalize_mac(value: Any) -> Any:
    """Lower-case colon separated form; empty means unset"""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError("MAC address must be a string")
    mac = value.replace("-", ":").lower()
    if not re.match(r'^[0-9a-f]{2}(:[0-9a-f]{2}){5}$', mac):
        raise ValueError(f"Invalid MAC address {value!r}")
    return mac


MacAddress = Annotated[Optional[str], BeforeValidator(normalize_mac)]


class WireModel(BaseModel):
    """
    Base for every record exchanged with collaborators
    Attributes are snake_case; dicts keyed by the original PascalCase
    field names (IfName, IsMgmt, TxBytes...) validate as well
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class UUIDandVersion(WireModel):
    """Identity of a controller-pushed object"""
    uuid: UUID = Field(default=NIL_UUID, alias="UUID")
    version: str = ""
