"""Pytest configuration and shared fixtures."""

import json
import logging
import os
from unittest.mock import Mock

import pytest

from zabbix_api.api import ZabbixAPI

# Disable logging during tests to reduce noise
logging.disable(logging.CRITICAL)

TEST_URL = "http://zabbix.example.com/api_jsonrpc.php"


@pytest.fixture(autouse=True)
def clean_env():
    """Clean environment variables before each test."""
    env_vars_to_clean = [
        "ZABBIX_URL",
        "ZABBIX_USERNAME",
        "ZABBIX_PASSWORD",
        "ZABBIX_VERIFY_SSL",
        "ZABBIX_REQUEST_TIMEOUT",
        "ZABBIX_LOG_REQUESTS",
        "LOG_LEVEL",
    ]

    # Store original values
    original_values = {}
    for var in env_vars_to_clean:
        original_values[var] = os.environ.get(var)
        if var in os.environ:
            del os.environ[var]

    yield

    # Restore original values
    for var, value in original_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]


class FakeZabbixServer:
    """Stands in for ``requests.Session`` and answers JSON-RPC calls by method.

    Responses queued for a method are consumed in order; the last one keeps
    being served. Every decoded request body is kept in ``requests``.
    """

    def __init__(self):
        self.responses = {}
        self.requests = []
        self.calls = []

    def respond(self, method, result=None, error=None):
        body = {"jsonrpc": "2.0", "id": 1}
        if error is not None:
            body["error"] = error
        else:
            body["result"] = result
        self.responses.setdefault(method, []).append(json.dumps(body).encode("utf-8"))
        return self

    def post(self, url, data=None, headers=None, timeout=None):
        payload = json.loads(data)
        self.requests.append(payload)
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})

        queue = self.responses.get(payload["method"])
        if not queue:
            raise AssertionError(f"Unexpected call to {payload['method']}")
        body = queue.pop(0) if len(queue) > 1 else queue[0]

        response = Mock()
        response.status_code = 200
        response.content = body
        return response

    def requests_for(self, method):
        return [request for request in self.requests if request["method"] == method]

    @property
    def last_request(self):
        return self.requests[-1]

    @property
    def last_params(self):
        return self.requests[-1]["params"]


@pytest.fixture
def server():
    """Scripted Zabbix server."""
    return FakeZabbixServer()


def connect(server, version):
    """API session that already discovered ``version`` and holds a token."""
    api = ZabbixAPI(TEST_URL, session=server)
    server.respond("APIInfo.version", version)
    api.discover_version()
    api.auth = "token123"
    server.requests.clear()
    server.calls.clear()
    del server.responses["APIInfo.version"]
    return api


@pytest.fixture
def api(server):
    """Session against a 2.0 server."""
    return connect(server, "2.0.11")


@pytest.fixture
def api_24(server):
    """Session against a 2.4 server."""
    return connect(server, "2.4.5")


@pytest.fixture
def legacy_api(server):
    """Session against a 1.8 server."""
    return connect(server, "1.8.21")


@pytest.fixture
def sample_host_data():
    """host.get record as returned with selectGroups/selectInterfaces."""
    return {
        "hostid": "10084",
        "proxy_hostid": "0",
        "host": "Zabbix server",
        "status": "0",
        "available": "1",
        "error": "",
        "name": "Zabbix server",
        "groups": [{"groupid": "4", "name": "Zabbix servers", "internal": "0"}],
        "interfaces": [
            {
                "interfaceid": "1",
                "hostid": "10084",
                "main": "1",
                "type": "1",
                "useip": "1",
                "ip": "127.0.0.1",
                "dns": "",
                "port": "10050",
            }
        ],
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "legacy: exercises the pre-2.0 dialect")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "legacy" in item.nodeid:
            item.add_marker(pytest.mark.legacy)
