"""Events (``event.get``)."""

from enum import IntEnum
from typing import List

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import EntityReader, WireId, WireInt, ZabbixObject


class SourceType(IntEnum):
    FROM_TRIGGER = 0
    FROM_DISCOVERY = 1
    FROM_AUTO_REGISTRATION = 2


class ObjectType(IntEnum):
    TRIGGER = 0
    DISCOVERED_HOST = 1
    DISCOVERED_SERVICE = 2
    AUTO_REGISTERED_HOST = 3


class Acknowledge(ZabbixObject):
    acknowledge_id: WireId = Field("", alias="acknowledgeid")
    user_id: WireId = Field("", alias="userid")
    event_id: WireId = Field("", alias="eventid")
    clock: WireInt = 0
    message: str = ""
    alias: str = ""


class Event(ZabbixObject):
    """Event object."""

    event_id: WireId = Field("", alias="eventid")
    source: WireInt = SourceType.FROM_TRIGGER
    object: WireInt = ObjectType.TRIGGER
    object_id: WireId = Field("", alias="objectid")
    clock: WireInt = 0
    value: WireInt = 0
    acknowledges: List[Acknowledge] = Field(default_factory=list)
    ns: WireInt = 0
    value_changed: WireInt = 0


class EventClient(EntityReader[Event]):
    """Read-only access to events.

    Decoded RAW_THEN_TYPED: the nested ``acknowledges`` array must survive.
    """

    object_name = "event"
    model = Event
    ids_key = "eventids"
    decode_strategy = DecodeStrategy.RAW_THEN_TYPED
    defaults = {
        "output": "extend",
        # event.get takes the snake_case flag in both API generations
        "select_acknowledges": "extend",
    }

    def get_by_object_ids(self, ids: List[str]) -> List[Event]:
        """Events generated by the objects (usually triggers) ``ids``."""
        return self.get({"objectids": ids})
