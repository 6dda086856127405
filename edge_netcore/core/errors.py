# edge_netcore/core/errors.py
"""
Error taxonomy for the selection engine and the network data model
Each error carries an error_code so callers can report it the same way
regardless of which component raised it
"""

from typing import Optional


class NetCoreError(Exception):
    """Base class for all edge_netcore errors"""

    error_code = "NETCORE_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "success": False,
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class NotFound(NetCoreError):
    """A lookup found no match. Never fatal, the caller picks a fallback"""

    error_code = "NOT_FOUND"


class PortNotFound(NotFound):
    """Raised by strict adapter resolution when a name matches no port"""

    error_code = "PORT_NOT_FOUND"

    def __init__(self, name: str):
        super().__init__(f"No port named {name!r}", {"name": name})
        self.name = name


class NoAddressAvailable(NetCoreError):
    """
    The eligible address set was empty
    Recoverable: retry with another port filter or wait for a newer snapshot
    """

    error_code = "NO_ADDRESS_AVAILABLE"


class NetworkModelError(NetCoreError, ValueError):
    """Malformed virtual network input, rejected as a whole"""

    error_code = "VALIDATION_ERROR"
