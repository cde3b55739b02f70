"""Zabbix API session: calls, authentication and version discovery."""

import logging
from typing import Any, Optional

import requests

from .config import ZabbixConfig
from .dialect import Dialect, dialect_for
from .entities import (
    ApplicationClient,
    EventClient,
    HistoryClient,
    HostClient,
    HostGroupClient,
    HostInterfaceClient,
    ItemClient,
    ProxyClient,
    SLAClient,
    TemplateClient,
    TriggerClient,
    UserMacroClient,
)
from .envelope import (
    RawResponseEnvelope,
    ResponseEnvelope,
    decode_raw_response,
    decode_response,
)
from .errors import DecodeError, ZabbixAPIError
from .logging_utils import WIRE_LOGGER
from .params import Params
from .transport import JSONRPCTransport
from .version import Version


class ZabbixAPI:
    """One independent API session.

    Typical URL is http://host/api_jsonrpc.php or http://host/zabbix/api_jsonrpc.php.
    The auth token and the discovered version are written by ``login()``;
    do not race a second login against calls running in other threads.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        wire_logger: Optional[logging.Logger] = None,
    ):
        self.transport = JSONRPCTransport(url, session=session, timeout=timeout, wire_logger=wire_logger)
        self.auth = ""
        self.logger = logging.getLogger(__name__)
        self._set_version(Version())

        self.hosts = HostClient(self)
        self.host_groups = HostGroupClient(self)
        self.host_interfaces = HostInterfaceClient(self)
        self.items = ItemClient(self)
        self.applications = ApplicationClient(self)
        self.triggers = TriggerClient(self)
        self.templates = TemplateClient(self)
        self.proxies = ProxyClient(self)
        self.events = EventClient(self)
        self.history = HistoryClient(self)
        self.user_macros = UserMacroClient(self)
        self.sla = SLAClient(self)

    @classmethod
    def from_config(cls, config: ZabbixConfig) -> "ZabbixAPI":
        """Build an unauthenticated session from configuration."""
        session = requests.Session()
        session.verify = config.verify_ssl
        wire_logger = logging.getLogger(WIRE_LOGGER) if config.log_requests else None
        return cls(
            config.url,
            session=session,
            timeout=config.request_timeout,
            wire_logger=wire_logger,
        )

    @property
    def url(self) -> str:
        return self.transport.url

    def set_session(self, session: requests.Session) -> None:
        """Replace the HTTP session, e.g. with one that skips TLS verification."""
        self.transport.session = session

    # Calls

    def call(self, method: str, params: Any = None) -> ResponseEnvelope:
        """Call ``method`` and return the envelope without inspecting ``error``.

        Raises only for transport and decode failures.
        """
        body = self.transport.send(method, Params() if params is None else params, auth=self.auth)
        return decode_response(body)

    def call_with_error(self, method: str, params: Any = None) -> ResponseEnvelope:
        """Like ``call()`` but raises ``ZabbixRPCError`` for a server error object."""
        response = self.call(method, params)
        if response.error is not None:
            raise response.error.to_exception()
        return response

    def call_with_raw_result(self, method: str, params: Any = None) -> RawResponseEnvelope:
        """Like ``call_with_error()`` but leaves ``result`` as raw JSON text."""
        body = self.transport.send(method, Params() if params is None else params, auth=self.auth)
        response = decode_raw_response(body)
        if response.error is not None:
            raise response.error.to_exception()
        return response

    def call_raw(self, method: str, raw_params: str) -> ResponseEnvelope:
        """Call ``method`` with an already-encoded JSON ``params`` fragment.

        For query shapes the typed clients do not model. Raises
        ``ZabbixRPCError`` for a server error object.
        """
        body = self.transport.send_raw(method, raw_params, auth=self.auth)
        response = decode_response(body)
        if response.error is not None:
            raise response.error.to_exception()
        return response

    # Authentication and version

    def login(self, user: str, password: str) -> str:
        """Call ``user.login`` and keep the returned token for later calls.

        The version is discovered before authenticating; if that fails it is
        retried once authenticated. Discovery failures never fail the login.
        """
        pre_login_error: Optional[ZabbixAPIError] = None
        try:
            self.discover_version()
        except ZabbixAPIError as e:
            pre_login_error = e
            self.logger.debug(f"Version discovery before login failed: {e}")

        response = self.call_with_error("user.login", {"user": user, "password": password})
        if not isinstance(response.result, str):
            raise DecodeError(f"user.login returned {type(response.result).__name__}, expected a token string")
        self.auth = response.result
        self.logger.info(f"Logged in to {self.url} as {user}")

        if pre_login_error is not None:
            try:
                self.discover_version()
            except ZabbixAPIError as e:
                self.logger.warning(f"Could not determine API version, assuming legacy dialect: {e}")

        return self.auth

    def api_version(self) -> str:
        """Return the raw version string reported by ``APIInfo.version``."""
        response = self.call_with_error("APIInfo.version", Params())
        if not isinstance(response.result, str):
            raise DecodeError(f"APIInfo.version returned {type(response.result).__name__}, expected a string")
        return response.result

    def discover_version(self) -> Version:
        """Fetch, parse and store the API version."""
        version = Version.parse(self.api_version())
        self._set_version(version)
        self.logger.debug(f"Zabbix API version {version}, {self.dialect.name} dialect")
        return version

    def _set_version(self, version: Version) -> None:
        self.version = version
        self.dialect: Dialect = dialect_for(version)

    def is_version_at_least(self, major: int, minor: int, release: int) -> bool:
        return self.version.at_least(major, minor, release)
