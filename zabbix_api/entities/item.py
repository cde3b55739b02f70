"""Items (``item.*``)."""

from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..dialect import LegacyRules
from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, WireInt, ZabbixObject
from .host import HostId


class ItemType(IntEnum):
    ZABBIX_AGENT = 0
    SNMPV1_AGENT = 1
    ZABBIX_TRAPPER = 2
    SIMPLE_CHECK = 3
    SNMPV2_AGENT = 4
    ZABBIX_INTERNAL = 5
    SNMPV3_AGENT = 6
    ZABBIX_AGENT_ACTIVE = 7
    ZABBIX_AGGREGATE = 8
    WEB_ITEM = 9
    EXTERNAL_CHECK = 10
    DATABASE_MONITOR = 11
    IPMI_AGENT = 12
    SSH_AGENT = 13
    TELNET_AGENT = 14
    CALCULATED = 15
    JMX_AGENT = 16


class ValueType(IntEnum):
    FLOAT = 0
    CHARACTER = 1
    LOG = 2
    UNSIGNED = 3
    TEXT = 4


class DataType(IntEnum):
    DECIMAL = 0
    OCTAL = 1
    HEXADECIMAL = 2
    BOOLEAN = 3


class DeltaType(IntEnum):
    AS_IS = 0
    SPEED = 1
    DELTA = 2


class AppInfo(ZabbixObject):
    """Application inlined into an item by ``selectApplications``."""

    hosts: List[HostId] = Field(default_factory=list)
    application_id: WireId = Field("", alias="applicationid")
    name: str = ""
    template_id: WireId = Field("", alias="templateid")


class Item(ZabbixObject):
    """Item object.

    ``applications`` is only filled by get with ``selectApplications``;
    ``application_ids`` is what create/update send as ``applications``.
    """

    item_id: WireId = Field("", alias="itemid")
    delay: WireInt = 0
    host_id: WireId = Field("", alias="hostid")
    interface_id: WireId = Field("", alias="interfaceid")
    key: str = Field("", alias="key_")
    last_value: str = Field("", alias="lastvalue")
    last_clock: str = Field("", alias="lastclock")
    units: str = ""
    name: str = ""
    type: WireInt = ItemType.ZABBIX_AGENT
    value_type: WireInt = ValueType.FLOAT
    data_type: WireInt = DataType.DECIMAL
    delta: WireInt = DeltaType.AS_IS
    description: str = ""
    error: str = ""
    history: WireInt = 0
    trends: WireInt = 0

    applications: Optional[List[AppInfo]] = None
    application_ids: List[str] = Field(default_factory=list, exclude=True)

    omit_empty = frozenset({"item_id", "interface_id", "history", "trends"})
    read_only = frozenset({"last_value", "last_clock", "error", "applications"})

    def to_wire(self) -> Dict[str, Any]:
        data = super().to_wire()
        data["applications"] = list(self.application_ids)
        return data


def items_by_key(items: List[Item]) -> Dict[str, Item]:
    """Index ``items`` by key. Duplicate keys raise ``ValueError``."""
    result: Dict[str, Item] = {}
    for item in items:
        if item.key in result:
            raise ValueError(f"Duplicate key {item.key}")
        result[item.key] = item
    return result


def _legacy_write(data: Dict[str, Any]) -> None:
    data["description"] = data.pop("name", "")


class ItemClient(EntityClient[Item]):
    """Items.

    Decoded RAW_THEN_TYPED: record-by-record mapping has been seen to drop
    the nested ``applications`` array.
    """

    object_name = "item"
    model = Item
    ids_key = "itemids"
    id_field = "item_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED
    defaults = {
        "output": "extend",
        "selectApplications": "extend",
    }
    legacy_rules = LegacyRules(
        renames={"selectApplications": "select_applications"},
        # hidden switch of the 1.8 frontend, required for select_* to work
        extras={"extendoutput": 1},
    )

    def normalize_legacy(self, record: Item) -> None:
        # 1.8 keeps the human readable name in "description".
        record.name = record.description
        record.description = ""

    def to_wire(self, record: Item) -> Dict[str, Any]:
        return self.dialect.adapt_write(record.to_wire(), _legacy_write)

    def get_by_id(self, object_id: str) -> Item:
        return self.get_one({self.ids_key: [object_id]})

    def get_by_application_id(self, application_id: str) -> List[Item]:
        return self.get({"applicationids": application_id})
