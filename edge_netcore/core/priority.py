# edge_netcore/core/priority.py
"""
Port-Configuration Priority List
Read semantics and explicit ranking of candidate device port configurations

Consumers iterate the list in order and treat the first entry as the
current best guess. A configuration is only ever adopted or replaced as a
whole: every helper here returns a new list and leaves its input untouched.
The promotion/demotion state machine itself lives in the connectivity
manager; it uses rank_key() so the ordering can be tested on its own.
"""

import logging
from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional, Tuple

from ..schemas.port import DevicePortConfig, DevicePortConfigList

logger = logging.getLogger(__name__)

_NEVER = datetime.min.replace(tzinfo=timezone.utc)


class Health(IntEnum):
    """Health tier derived from the last probe results; higher is better"""
    FAILING = 0
    UNTESTED = 1
    WORKING = 2


def _utc(ts: Optional[datetime]) -> datetime:
    """Comparable form of an optional timestamp; None sorts as oldest"""
    if ts is None:
        return _NEVER
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def is_untested(dpc: DevicePortConfig) -> bool:
    return dpc.last_failed is None and dpc.last_succeeded is None


def was_working(dpc: DevicePortConfig) -> bool:
    """Last probe succeeded, i.e. the latest success is newer than the latest failure"""
    if dpc.last_succeeded is None:
        return False
    return _utc(dpc.last_succeeded) > _utc(dpc.last_failed)


def is_failing(dpc: DevicePortConfig) -> bool:
    return dpc.last_failed is not None and not was_working(dpc)


def is_fallback(dpc: DevicePortConfig) -> bool:
    """No time priority: the lowest priority fallback entry"""
    return dpc.time_priority is None


def health(dpc: DevicePortConfig) -> Health:
    if was_working(dpc):
        return Health.WORKING
    if is_untested(dpc):
        return Health.UNTESTED
    return Health.FAILING


def rank_key(dpc: DevicePortConfig) -> Tuple[int, int, datetime, datetime]:
    """
    Sort key, larger is preferred:
    schema version, then health tier, then success recency, then time priority
    """
    return (dpc.version, health(dpc), _utc(dpc.last_succeeded), _utc(dpc.time_priority))


def rank(config_list: DevicePortConfigList) -> DevicePortConfigList:
    """New list ordered by rank_key; ties keep their current order"""
    ranked = sorted(config_list.port_config_list, key=rank_key, reverse=True)
    return DevicePortConfigList(port_config_list=ranked)


def current(config_list: DevicePortConfigList) -> Optional[DevicePortConfig]:
    """The most preferred configuration, or None for an empty list"""
    return config_list.port_config_list[0] if config_list.port_config_list else None


def first_working(config_list: DevicePortConfigList) -> Optional[DevicePortConfig]:
    """First configuration in list order whose last probe succeeded"""
    return next((d for d in config_list.port_config_list if was_working(d)), None)


def find(config_list: DevicePortConfigList, key: str) -> Optional[DevicePortConfig]:
    return next((d for d in config_list.port_config_list if d.key == key), None)


def index_of(config_list: DevicePortConfigList, key: str) -> int:
    """Position of the entry with this key, -1 if absent"""
    for i, dpc in enumerate(config_list.port_config_list):
        if dpc.key == key:
            return i
    return -1


def next_candidate(config_list: DevicePortConfigList, index: int) -> Optional[DevicePortConfig]:
    """
    Entry to try after the one at index failed
    Skips entries already known to be failing; None when nothing is left
    A negative index means no entry was tried yet and starts from the first
    """
    start = max(index, -1) + 1
    for dpc in config_list.port_config_list[start:]:
        if not is_failing(dpc):
            return dpc
    return None


def with_config(config_list: DevicePortConfigList, dpc: DevicePortConfig) -> DevicePortConfigList:
    """
    New list containing dpc
    An entry with the same key is replaced whole; otherwise dpc is inserted
    before the first entry with an older time priority (fallbacks stay last)
    """
    entries = list(config_list.port_config_list)
    i = index_of(config_list, dpc.key)
    if i >= 0:
        logger.info(f"Replacing port config {dpc.key!r} at position {i}")
        entries[i] = dpc
        return DevicePortConfigList(port_config_list=entries)

    pos = len(entries)
    if not is_fallback(dpc):
        for i, existing in enumerate(entries):
            if _utc(existing.time_priority) < _utc(dpc.time_priority):
                pos = i
                break
    logger.info(f"Adding port config {dpc.key!r} at position {pos}")
    entries.insert(pos, dpc)
    return DevicePortConfigList(port_config_list=entries)


def without_config(config_list: DevicePortConfigList, key: str) -> DevicePortConfigList:
    """New list without the entry with this key"""
    entries = [d for d in config_list.port_config_list if d.key != key]
    if len(entries) == len(config_list.port_config_list):
        logger.debug(f"Port config {key!r} not in list")
    return DevicePortConfigList(port_config_list=entries)
