"""Unit tests for the JSON-RPC envelope codec."""

import json

import pytest

from zabbix_api.entities.host import Host
from zabbix_api.entities.host_group import HostGroup
from zabbix_api.envelope import (
    RequestEnvelope,
    confirmed_ids,
    decode_raw_response,
    decode_response,
    encode_request,
    records_from_raw,
    records_from_result,
)
from zabbix_api.errors import DecodeError, TransportError, ZabbixRPCError


class TestEncodeRequest:
    """Test request serialization."""

    def test_empty_auth_is_omitted(self):
        """Test that auth is left out entirely when empty."""
        body = encode_request(RequestEnvelope(method="APIInfo.version", params={}, auth="", id=1))

        payload = json.loads(body)
        assert "auth" not in payload
        assert payload == {"jsonrpc": "2.0", "method": "APIInfo.version", "params": {}, "id": 1}

    def test_auth_is_included(self):
        """Test that a non-empty token is sent."""
        body = encode_request(RequestEnvelope(method="host.get", params={}, auth="abc123", id=7))

        payload = json.loads(body)
        assert payload["auth"] == "abc123"
        assert payload["id"] == 7

    def test_raw_params_embedded_verbatim(self):
        """Test that a raw params fragment is copied as is."""
        raw = '{"output":["hostid"],"limit":5}'

        body = encode_request(RequestEnvelope(method="host.get", id=3), raw_params=raw)

        assert b'"params":{"output":["hostid"],"limit":5}' in body
        assert json.loads(body)["params"] == {"output": ["hostid"], "limit": 5}

    def test_invalid_raw_params(self):
        """Test that a broken raw fragment fails before sending."""
        with pytest.raises(TransportError):
            encode_request(RequestEnvelope(method="host.get", id=1), raw_params='{"output":')

    def test_unserializable_params(self):
        """Test that unserializable params raise a transport error."""
        with pytest.raises(TransportError):
            encode_request(RequestEnvelope(method="host.get", params={"x": object()}, id=1))

    def test_models_in_params_use_wire_form(self):
        """Test that models are dumped with wire keys."""
        body = encode_request(
            RequestEnvelope(method="hostgroup.create", params=[HostGroup(name="Linux servers")], id=1)
        )

        assert json.loads(body)["params"] == [{"name": "Linux servers"}]


class TestDecodeResponse:
    """Test response decoding."""

    def test_result(self):
        response = decode_response(b'{"jsonrpc":"2.0","result":"2.0.11","id":1}')

        assert response.result == "2.0.11"
        assert response.error is None
        assert response.id == 1

    def test_error_object(self):
        """Test that the error object is decoded and maps to ZabbixRPCError."""
        response = decode_response(
            b'{"jsonrpc":"2.0","error":{"code":-32602,"message":"Invalid params.",'
            b'"data":"No permissions to referred object or it does not exist!"},"id":4}'
        )

        error = response.error.to_exception()
        assert isinstance(error, ZabbixRPCError)
        assert error.code == -32602
        assert error.message == "Invalid params."
        assert str(error) == "-32602 (Invalid params.): No permissions to referred object or it does not exist!"

    def test_not_json(self):
        with pytest.raises(DecodeError):
            decode_response(b"<html>Bad gateway</html>")

    def test_raw_result_is_kept_as_text(self):
        """Test the deferred variant keeps result as JSON text."""
        response = decode_raw_response(b'{"jsonrpc":"2.0","result":[{"hostid":"1"}],"id":2}')

        assert json.loads(response.result) == [{"hostid": "1"}]

    def test_raw_response_not_an_object(self):
        with pytest.raises(DecodeError):
            decode_raw_response(b"[1, 2]")


class TestRecordDecoding:
    """Test both record decode strategies."""

    def test_direct_accepts_numbers_as_strings(self):
        groups = records_from_result(HostGroup, [{"groupid": "4", "name": "Zabbix servers", "internal": "1"}])

        assert groups[0].group_id == "4"
        assert groups[0].internal == 1

    def test_direct_requires_list(self):
        with pytest.raises(DecodeError):
            records_from_result(HostGroup, {"groupid": "4"})

    def test_raw_keeps_nested_arrays(self, sample_host_data):
        hosts = records_from_raw(Host, json.dumps([sample_host_data]))

        assert len(hosts) == 1
        assert [group.group_id for group in hosts[0].groups] == ["4"]
        assert hosts[0].interfaces[0].ip == "127.0.0.1"
        assert hosts[0].interfaces[0].port == "10050"

    def test_raw_null_result(self):
        assert records_from_raw(Host, None) == []
        assert records_from_raw(Host, "null") == []


class TestConfirmedIds:
    """Test extraction of ids from mutation results."""

    def test_list(self):
        assert confirmed_ids({"hostids": ["1", "2"]}, "hostids") == ["1", "2"]

    def test_map(self):
        """Test the map form returned by some item.delete versions."""
        assert confirmed_ids({"itemids": {"0": "23", "1": "24"}}, "itemids") == ["23", "24"]

    def test_numeric_ids(self):
        assert confirmed_ids({"groupids": [5]}, "groupids") == ["5"]

    def test_missing_key(self):
        with pytest.raises(DecodeError):
            confirmed_ids({"templateids": []}, "hostids")
