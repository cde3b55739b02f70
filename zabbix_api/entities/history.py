"""History (``history.get``)."""

from enum import IntEnum
from typing import List

from pydantic import Field

from ..envelope import DecodeStrategy
from .base import QueryClient, WireId, WireInt, ZabbixObject


class History(ZabbixObject):
    """A single collected value of an item."""

    item_id: WireId = Field("", alias="itemid")
    clock: WireInt = 0
    value: str = ""
    nanoseconds: WireInt = Field(0, alias="ns")
    id: WireId = ""
    log_event_id: WireInt = Field(0, alias="logeventid")
    severity: WireInt = 0
    source: str = ""
    timestamp: WireInt = 0


class HistoryType(IntEnum):
    """Value of the ``history`` param, matching the item's value type."""

    FLOAT = 0
    CHARACTER = 1
    LOG = 2
    UNSIGNED = 3
    TEXT = 4


class HistoryClient(QueryClient[History]):
    """History values. Flat records, decoded DIRECT.

    History rows have no identifier of their own, so there is no get_by_id.
    """

    object_name = "history"
    model = History
    decode_strategy = DecodeStrategy.DIRECT

    def get_by_item_ids(self, ids: List[str], history_type: HistoryType = HistoryType.UNSIGNED) -> List[History]:
        """Values of the items ``ids``; ``history_type`` must match their value type."""
        return self.get({"itemids": ids, "history": int(history_type)})
