"""HTTP transport for JSON-RPC calls."""

import logging
import threading
from typing import Any, Optional

import requests

from . import __version__
from .envelope import RequestEnvelope, encode_request
from .errors import TransportError

CONTENT_TYPE = "application/json-rpc"
USER_AGENT = f"zabbix-api-client/{__version__}"


class JSONRPCTransport:
    """Sends JSON-RPC envelopes over HTTP POST and returns the raw body.

    The HTTP side is an injected ``requests.Session`` so TLS verification,
    proxies and adapters are configured by the caller. Request ids increase
    monotonically and are safe to draw from several threads.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        wire_logger: Optional[logging.Logger] = None,
    ):
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.wire_logger = wire_logger
        self._last_id = 0
        self._id_lock = threading.Lock()

    def next_id(self) -> int:
        with self._id_lock:
            self._last_id += 1
            return self._last_id

    def send(self, method: str, params: Any, auth: str = "") -> bytes:
        """Send ``params`` as a structured value."""
        request = RequestEnvelope(method=method, params=params, auth=auth, id=self.next_id())
        return self._post(encode_request(request))

    def send_raw(self, method: str, raw_params: str, auth: str = "") -> bytes:
        """Send ``raw_params``, an already-encoded JSON fragment, verbatim."""
        request = RequestEnvelope(method=method, auth=auth, id=self.next_id())
        return self._post(encode_request(request, raw_params=raw_params))

    def _log(self, fmt: str, *args: Any) -> None:
        if self.wire_logger is not None:
            self.wire_logger.info(fmt, *args)

    def _post(self, body: bytes) -> bytes:
        self._log("Request : %s", body.decode("utf-8"))

        headers = {
            "Content-Type": CONTENT_TYPE,
            "User-Agent": USER_AGENT,
        }
        try:
            response = self.session.post(
                self.url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
            content = response.content
        except requests.exceptions.RequestException as e:
            self._log("Error   : %s", e)
            raise TransportError(f"Request failed: {e}") from e

        self._log("Response: %s", content.decode("utf-8", errors="replace"))
        return content
