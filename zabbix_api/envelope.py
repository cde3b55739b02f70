"""JSON-RPC request/response envelopes and result decoding."""

import json
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .errors import DecodeError, TransportError, ZabbixRPCError

JSONRPC_VERSION = "2.0"

M = TypeVar("M", bound=BaseModel)


class DecodeStrategy(str, Enum):
    """How the ``result`` array of a get call becomes typed records.

    DIRECT maps each already-decoded JSON object onto the model one record at
    a time. RAW_THEN_TYPED keeps ``result`` as raw JSON text and validates the
    whole array in a single typed pass, which keeps optional nested arrays
    (selectGroups, selectInterfaces, selectFunctions ...) intact.
    """

    DIRECT = "direct"
    RAW_THEN_TYPED = "raw_then_typed"


class RPCError(BaseModel):
    """Error object of a JSON-RPC response."""

    code: int
    message: str = ""
    data: str = ""

    def to_exception(self) -> ZabbixRPCError:
        return ZabbixRPCError(self.code, self.message, self.data)


class RequestEnvelope(BaseModel):
    """Outgoing JSON-RPC request."""

    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Any = None
    auth: str = Field(default="", description="Session token, omitted from the wire when empty")
    id: int

    def header_fields(self) -> Dict[str, Any]:
        """Envelope members in wire order, ``params`` left as a placeholder."""
        fields: Dict[str, Any] = {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": None,
        }
        if self.auth:
            fields["auth"] = self.auth
        fields["id"] = self.id
        return fields


class ResponseEnvelope(BaseModel):
    """Incoming JSON-RPC response with ``result`` already decoded."""

    jsonrpc: str = ""
    error: Optional[RPCError] = None
    result: Any = None
    id: Optional[int] = None


class RawResponseEnvelope(BaseModel):
    """Incoming JSON-RPC response with ``result`` kept as raw JSON text."""

    jsonrpc: str = ""
    error: Optional[RPCError] = None
    result: Optional[str] = None
    id: Optional[int] = None


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        to_wire = getattr(value, "to_wire", None)
        if callable(to_wire):
            return to_wire()
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (set, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_encode_default)


def encode_params(params: Any) -> str:
    """Serialize a structured params value."""
    try:
        return _dumps(params)
    except (TypeError, ValueError) as e:
        raise TransportError(f"Cannot serialize params: {e}") from e


def encode_request(request: RequestEnvelope, raw_params: Optional[str] = None) -> bytes:
    """Serialize ``request``.

    When ``raw_params`` is given it must be an already-encoded JSON fragment;
    it is embedded verbatim in place of ``request.params``.
    """
    if raw_params is None:
        params_json = encode_params(request.params)
    else:
        try:
            json.loads(raw_params)
        except ValueError as e:
            raise TransportError(f"Raw params are not valid JSON: {e}") from e
        params_json = raw_params

    members = []
    for key, value in request.header_fields().items():
        encoded = params_json if key == "params" else _dumps(value)
        members.append(f"{json.dumps(key)}:{encoded}")
    return ("{" + ",".join(members) + "}").encode("utf-8")


def decode_response(body: bytes) -> ResponseEnvelope:
    """Decode a response body, fully decoding ``result``."""
    try:
        return ResponseEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Invalid JSON-RPC response: {e}", body=body) from e


def decode_raw_response(body: bytes) -> RawResponseEnvelope:
    """Decode a response body, deferring ``result`` as raw JSON text."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON-RPC response: {e}", body=body) from e
    if not isinstance(data, dict):
        raise DecodeError("JSON-RPC response is not an object", body=body)

    if "result" in data:
        data["result"] = json.dumps(data["result"])
    try:
        return RawResponseEnvelope.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Invalid JSON-RPC response: {e}", body=body) from e


@lru_cache(maxsize=None)
def _list_adapter(model: Type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(List[model])  # type: ignore[valid-type]


def records_from_result(model: Type[M], result: Any) -> List[M]:
    """DIRECT strategy: map decoded JSON objects onto ``model`` one by one."""
    if result is None:
        return []
    if not isinstance(result, list):
        raise DecodeError(f"Expected a list of {model.__name__} records, got {type(result).__name__}")
    try:
        return [model.model_validate(row) for row in result]
    except ValidationError as e:
        raise DecodeError(f"Cannot decode {model.__name__}: {e}") from e


def records_from_raw(model: Type[M], raw: Optional[str]) -> List[M]:
    """RAW_THEN_TYPED strategy: validate the raw ``result`` text as a typed list."""
    if raw is None or raw == "null":
        return []
    try:
        return _list_adapter(model).validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Cannot decode {model.__name__} list: {e}") from e


def confirmed_ids(result: Any, ids_key: str) -> List[str]:
    """Extract ``result[ids_key]`` from a create/update/delete response.

    Some server versions answer with a map instead of a list.
    """
    if not isinstance(result, dict) or ids_key not in result:
        raise DecodeError(f"Response has no '{ids_key}' member")
    ids = result[ids_key]
    if isinstance(ids, dict):
        ids = list(ids.values())
    if not isinstance(ids, list):
        raise DecodeError(f"'{ids_key}' is neither a list nor a map")
    return [str(i) for i in ids]
