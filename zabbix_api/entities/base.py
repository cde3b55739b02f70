"""Shared shape of the entity clients.

Every entity client follows the same pattern: ``<object>.get`` with default
query flags filled in and rewritten for the session's dialect, single-record
lookups that insist on exactly one match, and bulk create/update/delete that
check the number of ids the server confirms.
"""

import logging
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Generic,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

from ..dialect import Dialect, LegacyRules
from ..envelope import DecodeStrategy, confirmed_ids, records_from_raw, records_from_result
from ..errors import ExpectedMore, ExpectedOneResult
from ..params import Params, ParamValue

if TYPE_CHECKING:
    from ..api import ZabbixAPI


def _to_int(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value else 0
    return value


def _int_to_str(value: int) -> str:
    return str(int(value))


# Integer that travels as a JSON string ("1"), as the API encodes numbers.
WireInt = Annotated[int, BeforeValidator(_to_int), PlainSerializer(_int_to_str, return_type=str)]

# Identifier that some API versions send as a number.
WireId = Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, int) else v)]


class ZabbixObject(BaseModel):
    """Base model for API objects.

    Field aliases are the wire keys. ``omit_empty`` lists fields dropped from
    write payloads while unset, ``read_only`` fields the server fills in and
    never accepts back.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    omit_empty: ClassVar[FrozenSet[str]] = frozenset()
    read_only: ClassVar[FrozenSet[str]] = frozenset()

    def to_wire(self) -> Dict[str, Any]:
        """Dump as the JSON object sent to create/update calls."""
        exclude = set(self.read_only)
        exclude.update(name for name in self.omit_empty if not getattr(self, name))
        data = self.model_dump(mode="json", by_alias=True, exclude=exclude, exclude_none=True)
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            value = getattr(self, name)
            if key in data and isinstance(value, list) and all(isinstance(v, ZabbixObject) for v in value):
                data[key] = [v.to_wire() for v in value]
        return data


M = TypeVar("M", bound=ZabbixObject)


class QueryClient(Generic[M]):
    """``<object>.get`` with defaults, dialect rewrites and typed decoding."""

    object_name: ClassVar[str] = ""
    model: ClassVar[Type[ZabbixObject]] = ZabbixObject
    defaults: ClassVar[Mapping[str, ParamValue]] = {"output": "extend"}
    legacy_rules: ClassVar[LegacyRules] = LegacyRules()
    decode_strategy: ClassVar[DecodeStrategy] = DecodeStrategy.DIRECT

    def __init__(self, api: "ZabbixAPI"):
        self.api = api
        self.logger = logging.getLogger(self.__class__.__module__)

    @property
    def dialect(self) -> Dialect:
        return self.api.dialect

    def method(self, action: str) -> str:
        return f"{self.object_name}.{action}"

    def build_params(self, params: Optional[Mapping[str, ParamValue]] = None) -> Params:
        """Fill in defaults missing from ``params`` and adapt them to the dialect."""
        query = Params.of(params).with_defaults(self.defaults)
        return self.dialect.adapt_params(query, self.legacy_rules)

    def get(self, params: Optional[Mapping[str, ParamValue]] = None) -> List[M]:
        """Wrapper for ``<object>.get``. ``params`` is copied, never modified."""
        query = self.build_params(params)
        records = self._fetch(self.method("get"), query)
        self.logger.debug(f"{self.method('get')} returned {len(records)} records")
        return self.dialect.adapt_records(records, self.normalize_legacy)

    def get_one(self, params: Mapping[str, ParamValue]) -> M:
        """Run ``get`` and require exactly one matching record."""
        records = self.get(params)
        if len(records) != 1:
            raise ExpectedOneResult(len(records))
        return records[0]

    def normalize_legacy(self, record: M) -> None:
        """Reshape a record returned by the pre-2.0 API. Nothing to do by default."""

    def _fetch(self, method: str, params: Params) -> List[M]:
        if self.decode_strategy is DecodeStrategy.RAW_THEN_TYPED:
            raw = self.api.call_with_raw_result(method, params)
            return records_from_raw(self.model, raw.result)
        response = self.api.call_with_error(method, params)
        return records_from_result(self.model, response.result)


class EntityReader(QueryClient[M]):
    """Entities that can be looked up by id."""

    ids_key: ClassVar[str] = ""

    def get_by_id(self, object_id: str) -> M:
        """Get the record with ``object_id``; exactly one must match."""
        return self.get_one({self.ids_key: object_id})


class EntityClient(EntityReader[M]):
    """Entities with create/update/delete.

    ``create``, ``update`` and ``delete`` mutate the records passed in: ids are
    assigned after create/update and cleared after delete. When the server
    confirms a different number of ids, ``ExpectedMore`` is raised and no
    record is touched.
    """

    id_field: ClassVar[str] = ""

    def to_wire(self, record: M) -> Dict[str, Any]:
        return record.to_wire()

    def create(self, records: List[M]) -> None:
        """Wrapper for ``<object>.create``. Sets the id of every record."""
        payload = [self.to_wire(record) for record in records]
        ids = self._confirm(self.method("create"), payload, len(records))
        for record, new_id in zip(records, ids):
            setattr(record, self.id_field, new_id)
        self.logger.info(f"Created {len(ids)} {self.object_name} objects")

    def update(self, records: List[M]) -> None:
        """Wrapper for ``<object>.update``."""
        payload = [self.to_wire(record) for record in records]
        ids = self._confirm(self.method("update"), payload, len(records))
        for record, updated_id in zip(records, ids):
            setattr(record, self.id_field, updated_id)
        self.logger.info(f"Updated {len(ids)} {self.object_name} objects")

    def delete(self, records: List[M]) -> None:
        """Wrapper for ``<object>.delete``. Clears the id of every record on success."""
        self.delete_by_ids([getattr(record, self.id_field) for record in records])
        for record in records:
            setattr(record, self.id_field, "")

    def delete_by_ids(self, ids: List[str]) -> None:
        """Wrapper for ``<object>.delete`` taking bare ids."""
        self._confirm(self.method("delete"), self.delete_payload(ids), len(ids))
        self.logger.info(f"Deleted {len(ids)} {self.object_name} objects")

    def delete_payload(self, ids: List[str]) -> Any:
        return list(ids)

    def _confirm(self, method: str, payload: Any, expected: int, ids_key: Optional[str] = None) -> List[str]:
        response = self.api.call_with_error(method, payload)
        ids = confirmed_ids(response.result, ids_key or self.ids_key)
        if len(ids) != expected:
            raise ExpectedMore(expected, len(ids))
        return ids
