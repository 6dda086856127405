# edge_netcore/core/publisher.py
"""
Snapshot publisher for the device network status
The connectivity manager owns one publisher and replaces the snapshot as a
whole; readers take the current snapshot once and run all selection calls
against it, so they never see a mix of old and new port records
"""

import logging
import threading
from typing import Optional, Tuple

from ..schemas.port import DeviceNetworkStatus

logger = logging.getLogger(__name__)


class NetworkStatusPublisher:
    """
    Holds the current DeviceNetworkStatus

    Features:
    - Publish by replacement, never in-place edits
    - Generation counter so readers can tell whether the snapshot changed
    """

    def __init__(self, initial: Optional[DeviceNetworkStatus] = None):
        self._lock = threading.Lock()
        self._status = initial if initial is not None else DeviceNetworkStatus()
        self._generation = 0

    def publish(self, status: DeviceNetworkStatus) -> int:
        """
        Replace the current snapshot

        Returns:
            The new generation number
        """
        if not isinstance(status, DeviceNetworkStatus):
            raise TypeError(f"Expected DeviceNetworkStatus, got {type(status).__name__}")
        with self._lock:
            self._status = status
            self._generation += 1
            generation = self._generation
        logger.info(f"Published device network status generation {generation} with {len(status.ports)} port(s)")
        return generation

    def current(self) -> DeviceNetworkStatus:
        with self._lock:
            return self._status

    def snapshot(self) -> Tuple[int, DeviceNetworkStatus]:
        """Current generation and snapshot, read together"""
        with self._lock:
            return self._generation, self._status

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation
