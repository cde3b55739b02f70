"""Triggers (``trigger.*``)."""

from enum import IntEnum
from typing import List

from pydantic import Field

from ..dialect import LegacyRules
from ..envelope import DecodeStrategy
from .base import EntityClient, WireId, WireInt, ZabbixObject


class TriggerFlags(IntEnum):
    PLAIN = 0
    DISCOVERED = 4


class TriggerPriority(IntEnum):
    NOT_CLASSIFIED = 0
    INFORMATION = 1
    WARNING = 2
    AVERAGE = 3
    HIGH = 4
    DISASTER = 5


class TriggerStatus(IntEnum):
    ENABLED = 0
    DISABLED = 1


class TriggerType(IntEnum):
    NO_MULTIPLE = 0
    GENERATE_MULTIPLE_EVENTS = 1


class TriggerValue(IntEnum):
    OK = 0
    PROBLEM = 1


class TriggerValueFlags(IntEnum):
    UP_TO_DATE = 0
    UNKNOWN = 1


# API 1.8 reports an unknown trigger state as value 2.
LEGACY_VALUE_UNKNOWN = 2


class TriggerFunction(ZabbixObject):
    """Function of a trigger expression, inlined by ``selectFunctions``."""

    function_id: WireId = Field("", alias="functionid")
    item_id: WireId = Field("", alias="itemid")
    function: str = ""
    parameter: str = ""


class Trigger(ZabbixObject):
    """Trigger object."""

    trigger_id: WireId = Field("", alias="triggerid")
    description: str = ""
    functions: List[TriggerFunction] = Field(default_factory=list)
    expression: str = ""
    comments: str = ""
    error: str = ""
    flags: WireInt = TriggerFlags.PLAIN
    last_change: WireInt = Field(0, alias="lastchange")
    priority: WireInt = TriggerPriority.NOT_CLASSIFIED
    status: WireInt = TriggerStatus.ENABLED
    template_id: WireId = Field("", alias="templateid")
    type: WireInt = TriggerType.NO_MULTIPLE
    url: str = ""
    value: WireInt = TriggerValue.OK
    value_flags: WireInt = TriggerValueFlags.UP_TO_DATE

    omit_empty = frozenset({"trigger_id"})
    read_only = frozenset(
        {"functions", "error", "flags", "last_change", "template_id", "value", "value_flags"}
    )


class TriggerClient(EntityClient[Trigger]):
    """Triggers.

    Decoded RAW_THEN_TYPED: the nested ``functions`` array must survive.
    """

    object_name = "trigger"
    model = Trigger
    ids_key = "triggerids"
    id_field = "trigger_id"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED
    defaults = {
        "output": "extend",
        "expandExpression": "extend",
        "expandDescription": "flag",
        "selectFunctions": "extend",
    }
    legacy_rules = LegacyRules(
        renames={"selectFunctions": "select_functions"},
        drops=("expandExpression",),
    )

    def normalize_legacy(self, record: Trigger) -> None:
        if record.value == LEGACY_VALUE_UNKNOWN:
            record.value = TriggerValue.OK
            record.value_flags = TriggerValueFlags.UNKNOWN

    def get_by_host_id(self, host_id: str) -> List[Trigger]:
        return self.get({"hostids": host_id})
