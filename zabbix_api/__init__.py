"""
Zabbix API client

Typed Python binding for the Zabbix JSON-RPC management API, working against
both the pre-2.0 and the 2.0+ generations of the API.
"""

# Logging is configured at app entry point via zabbix_api/logging_utils.py
# No need to configure logging here.

__version__ = "0.1.0"
__author__ = "Zabbix API Client Team"
__description__ = "Typed client for the Zabbix JSON-RPC API"

from .api import ZabbixAPI
from .errors import (
    DecodeError,
    ExpectedMore,
    ExpectedOneResult,
    TransportError,
    UnsupportedVersionError,
    VersionDiscoveryError,
    ZabbixAPIError,
    ZabbixRPCError,
)
from .params import Params
from .version import Version

__all__ = [
    "ZabbixAPI",
    "Params",
    "Version",
    "ZabbixAPIError",
    "TransportError",
    "DecodeError",
    "ZabbixRPCError",
    "ExpectedOneResult",
    "ExpectedMore",
    "VersionDiscoveryError",
    "UnsupportedVersionError",
]
