"""Exception hierarchy for the Zabbix API client."""

from typing import Optional


class ZabbixAPIError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ZabbixAPIError):
    """Network or serialization failure. The response payload was never inspected."""


class DecodeError(ZabbixAPIError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body


class ZabbixRPCError(ZabbixAPIError):
    """Error object returned by the server inside a JSON-RPC response."""

    def __init__(self, code: int, message: str, data: str = ""):
        super().__init__(f"{code} ({message}): {data}")
        self.code = code
        self.message = message
        self.data = data


class ExpectedOneResult(ZabbixAPIError):
    """A single-record lookup matched zero or several records."""

    def __init__(self, count: int):
        super().__init__(f"Expected exactly one result, got {count}.")
        self.count = count


class ExpectedMore(ZabbixAPIError):
    """A bulk create/delete confirmed a different number of ids than submitted.

    The request itself succeeded; the caller has to reconcile the server state.
    """

    def __init__(self, expected: int, got: int):
        super().__init__(f"Expected {expected}, got {got}.")
        self.expected = expected
        self.got = got


class VersionDiscoveryError(ZabbixAPIError):
    """The API version could not be fetched or parsed."""


class UnsupportedVersionError(ZabbixAPIError):
    """Operation does not exist in the API generation of the connected server."""
